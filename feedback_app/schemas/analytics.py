# feedback_app/schemas/analytics.py
from datetime import datetime
from typing import Any, Dict, List
from pydantic import BaseModel, Field
from feedback_app.schemas.survey import SurveySummary

class ReshapedResponse(BaseModel):
    """One submission with its answers keyed by question id."""
    id: int | None = None
    survey_id: int | None = None
    answers: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None

class QuestionStats(BaseModel):
    total: int = 0
    answers: Dict[str, int] = Field(default_factory=dict)

class AnswerShare(BaseModel):
    label: str
    count: int
    percentage: int

class QuestionAnalytics(QuestionStats):
    question_id: str
    text: str
    type: str
    distribution: List[AnswerShare] = Field(default_factory=list)

class SurveyAnalytics(BaseModel):
    survey_id: int
    title: str
    description: str
    is_active: bool
    response_count: int
    question_count: int
    questions: List[QuestionAnalytics]
    responses: List[ReshapedResponse]

class Overview(BaseModel):
    total_surveys: int = 0
    total_responses: int = 0
    avg_responses_per_survey: int = 0

class DashboardOut(BaseModel):
    overview: Overview
    surveys: List[SurveySummary]
