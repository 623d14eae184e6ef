# feedback_app/crud/user.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from feedback_app.auth.jwt import get_password_hash
from feedback_app.models.user import User, ROLE_USER

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email.lower())).scalars().first()

def create_user(db: Session, email: str, password: str, role: str = ROLE_USER) -> User:
    user = User(
        email=email.lower(),
        hashed_password=get_password_hash(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
