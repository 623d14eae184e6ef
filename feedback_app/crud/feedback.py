# feedback_app/crud/feedback.py
import logging
from typing import Any, Iterable, List, Mapping
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from feedback_app.crud.survey import get_survey
from feedback_app.models.feedback import Feedback

logger = logging.getLogger(__name__)

def create_feedback(
    db: Session,
    survey_id: int,
    responses: Iterable[Mapping[str, Any]],
    ip_address: str = "unknown",
    user_agent: str = "unknown",
) -> Feedback:
    # raises NotFoundError for missing or inactive surveys
    get_survey(db, survey_id, active_only=True)
    row = Feedback(
        survey_id=survey_id,
        responses=[dict(r) for r in responses],
        ip_address=ip_address,
        user_agent=user_agent,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("feedback %s stored for survey %s", row.id, survey_id)
    return row

def list_feedback(db: Session, survey_id: int) -> List[Feedback]:
    return db.execute(
        select(Feedback)
        .where(Feedback.survey_id == survey_id)
        .order_by(desc(Feedback.submitted_at), desc(Feedback.id))
    ).scalars().all()

