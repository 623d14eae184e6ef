# feedback_app/db/seed.py
from sqlalchemy.orm import Session
from feedback_app.crud.user import create_user, get_user_by_email
from feedback_app.models.user import ROLE_ADMIN

def seed_admin(db: Session, email: str | None, password: str | None) -> bool:
    # nothing configured, or already there
    if not email or not password:
        return False
    if get_user_by_email(db, email):
        return False
    create_user(db, email=email, password=password, role=ROLE_ADMIN)
    return True
