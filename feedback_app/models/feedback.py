from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, DateTime, ForeignKey, JSON, String, func
from feedback_app.db.base import Base

class Feedback(Base):
    """One anonymous submission; written once and never updated."""
    __tablename__ = "feedback"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    survey_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("surveys.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    # Raw [{"question_id": ..., "answer": ...}] entries as submitted
    responses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    submitted_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), index=True)
    ip_address: Mapped[str | None] = mapped_column(String(64))
    user_agent: Mapped[str | None] = mapped_column(String(512))

    survey = relationship("Survey", back_populates="feedback")
