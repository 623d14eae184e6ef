# feedback_app/api/analytics_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from feedback_app.analytics.aggregation import build_survey_analytics, compute_overview
from feedback_app.auth.deps import get_current_admin
from feedback_app.crud.feedback import list_feedback
from feedback_app.crud.survey import get_survey, list_owner_surveys_with_counts
from feedback_app.db.session import get_db
from feedback_app.schemas.analytics import DashboardOut, SurveyAnalytics
from feedback_app.schemas.auth import TokenClaims

router = APIRouter(prefix="/analytics", tags=["Analytics"])

@router.get("/overview", response_model=DashboardOut)
def overview(admin: TokenClaims = Depends(get_current_admin), db: Session = Depends(get_db)):
    summaries = list_owner_surveys_with_counts(db, admin.user_id)
    return DashboardOut(overview=compute_overview(summaries), surveys=summaries)

@router.get("/{survey_id}", response_model=SurveyAnalytics)
def survey_analytics(survey_id: int, admin: TokenClaims = Depends(get_current_admin), db: Session = Depends(get_db)):
    # both reads must succeed before anything is aggregated
    survey = get_survey(db, survey_id, owner_id=admin.user_id)
    submissions = list_feedback(db, survey_id)
    return build_survey_analytics(survey, submissions)
