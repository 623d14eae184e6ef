# feedback_app/api/feedback_routes.py
from typing import List
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from feedback_app.auth.deps import get_current_admin
from feedback_app.crud import feedback as feedback_crud
from feedback_app.crud.survey import get_survey
from feedback_app.db.session import get_db
from feedback_app.schemas.auth import TokenClaims
from feedback_app.schemas.feedback import FeedbackCreated, FeedbackOut, FeedbackSubmit

router = APIRouter(prefix="/feedback", tags=["Feedback"])

def client_ip(request: Request) -> str:
    return (
        request.headers.get("x-forwarded-for")
        or request.headers.get("x-real-ip")
        or "unknown"
    )

@router.post("/{survey_id}", response_model=FeedbackCreated, status_code=201)
def submit_feedback(survey_id: int, payload: FeedbackSubmit, request: Request, db: Session = Depends(get_db)):
    """Anonymous submission; 404 when the survey is missing or inactive"""
    row = feedback_crud.create_feedback(
        db,
        survey_id,
        [r.model_dump() for r in payload.responses],
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent") or "unknown",
    )
    return FeedbackCreated(feedback_id=row.id)

@router.get("/{survey_id}", response_model=List[FeedbackOut], summary="Raw submissions (newest first)")
def list_feedback(survey_id: int, admin: TokenClaims = Depends(get_current_admin), db: Session = Depends(get_db)):
    get_survey(db, survey_id, owner_id=admin.user_id)
    return feedback_crud.list_feedback(db, survey_id)
