# feedback_app/schemas/survey.py
from datetime import datetime
from enum import Enum
from typing import List
from pydantic import BaseModel, Field, model_validator

class QuestionType(str, Enum):
    text = "text"
    rating = "rating"
    multiple_choice = "multiple_choice"
    single_choice = "single_choice"

CHOICE_TYPES = {QuestionType.multiple_choice, QuestionType.single_choice}

class Question(BaseModel):
    id: str = Field(min_length=1)
    text: str
    type: QuestionType
    options: List[str] | None = None
    required: bool = False

    @model_validator(mode="after")
    def _options_match_type(self):
        if self.type in CHOICE_TYPES:
            if not self.options:
                raise ValueError(f"question {self.id!r} of type {self.type.value} needs options")
        elif self.options:
            raise ValueError(f"question {self.id!r} of type {self.type.value} takes no options")
        return self

class SurveyCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    questions: List[Question] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_question_ids(self):
        ids = [q.id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError("question ids must be unique within a survey")
        return self

class SurveyOut(BaseModel):
    """Survey as served to respondents (no owner reference)."""
    id: int
    title: str
    description: str
    questions: List[Question]
    is_active: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True

class SurveyAdminOut(SurveyOut):
    created_by: int

class PublicSurveyOut(BaseModel):
    id: int
    title: str
    description: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True

class SurveySummary(SurveyAdminOut):
    response_count: int = 0
