# feedback_app/crud/survey.py
import logging
from typing import List
from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from feedback_app.core.errors import NotFoundError
from feedback_app.models.feedback import Feedback
from feedback_app.models.survey import Survey
from feedback_app.schemas.survey import SurveyCreate, SurveySummary

logger = logging.getLogger(__name__)

def create_survey(db: Session, payload: SurveyCreate, owner_id: int) -> Survey:
    row = Survey(
        title=payload.title,
        description=payload.description,
        questions=[q.model_dump(mode="json") for q in payload.questions],
        created_by=owner_id,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("survey %s created by user %s with %d questions", row.id, owner_id, len(row.questions))
    return row

def get_survey(db: Session, survey_id: int, owner_id: int | None = None, active_only: bool = False) -> Survey:
    """Fetch one survey or raise NotFoundError.

    ``owner_id`` restricts the lookup to surveys created by that admin;
    ``active_only`` hides soft-disabled surveys from respondents.
    """
    stmt = select(Survey).where(Survey.id == survey_id)
    if owner_id is not None:
        stmt = stmt.where(Survey.created_by == owner_id)
    survey = db.execute(stmt).scalars().first()
    if survey is None or (active_only and not survey.is_active):
        raise NotFoundError()
    return survey

def list_public_surveys(db: Session, limit: int = 50) -> List[Survey]:
    return db.execute(
        select(Survey)
        .where(Survey.is_active.is_(True))
        .order_by(desc(Survey.created_at), desc(Survey.id))
        .limit(limit)
    ).scalars().all()

def list_owner_surveys_with_counts(db: Session, owner_id: int) -> List[SurveySummary]:
    """Owner's surveys, newest first, each carrying its feedback count."""
    counts = (
        select(Feedback.survey_id, func.count(Feedback.id).label("n"))
        .group_by(Feedback.survey_id)
        .subquery()
    )
    rows = db.execute(
        select(Survey, func.coalesce(counts.c.n, 0))
        .outerjoin(counts, counts.c.survey_id == Survey.id)
        .where(Survey.created_by == owner_id)
        .order_by(desc(Survey.created_at), desc(Survey.id))
    ).all()
    return [
        SurveySummary.model_validate(survey).model_copy(update={"response_count": int(n)})
        for survey, n in rows
    ]
