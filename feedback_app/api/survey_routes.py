# feedback_app/api/survey_routes.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from feedback_app.auth.deps import get_current_admin
from feedback_app.core.config import settings
from feedback_app.crud import survey as survey_crud
from feedback_app.db.session import get_db
from feedback_app.schemas.auth import TokenClaims
from feedback_app.schemas.survey import (
    PublicSurveyOut,
    SurveyAdminOut,
    SurveyCreate,
    SurveyOut,
    SurveySummary,
)

router = APIRouter(prefix="/surveys", tags=["Surveys"])

@router.post("/create", response_model=SurveyAdminOut, status_code=201)
def create_survey(
    payload: SurveyCreate,
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    return survey_crud.create_survey(db, payload, owner_id=admin.user_id)

@router.get("/public", response_model=List[PublicSurveyOut], summary="Active surveys (newest first)")
def public_surveys(db: Session = Depends(get_db)):
    return survey_crud.list_public_surveys(db, limit=settings.PUBLIC_SURVEY_LIMIT)

@router.get("/my-surveys", response_model=List[SurveySummary], summary="Own surveys with response counts")
def my_surveys(admin: TokenClaims = Depends(get_current_admin), db: Session = Depends(get_db)):
    return survey_crud.list_owner_surveys_with_counts(db, admin.user_id)

@router.get("/{survey_id}", response_model=SurveyOut)
def get_survey(survey_id: int, db: Session = Depends(get_db)):
    return survey_crud.get_survey(db, survey_id, active_only=True)
