# feedback_app/schemas/feedback.py
from datetime import datetime
from typing import Any, List, Union
from pydantic import BaseModel, Field

# Scalar for text/rating/single choice, list for multiple choice.
# bool precedes int so JSON true is stored as true, not 1
Answer = Union[str, bool, int, float, List[str], None]

class ResponseEntry(BaseModel):
    question_id: str | None = None
    answer: Answer = None

class FeedbackSubmit(BaseModel):
    responses: List[ResponseEntry] = Field(default_factory=list)

class FeedbackCreated(BaseModel):
    success: bool = True
    feedback_id: int

class FeedbackOut(BaseModel):
    id: int
    survey_id: int
    responses: List[Any]
    submitted_at: datetime | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    class Config:
        from_attributes = True
