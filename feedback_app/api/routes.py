# feedback_app/api/routes.py
import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from feedback_app.db.session import get_db
from feedback_app.crud.user import create_user, get_user_by_email
from feedback_app.schemas.user import UserCreate, UserOut
from feedback_app.schemas.auth import Token, TokenClaims
from feedback_app.auth.deps import get_current_user
from feedback_app.auth.jwt import create_access_token, verify_password
from feedback_app.core.errors import AuthError

logger = logging.getLogger(__name__)

router = APIRouter()

def _token_for(user) -> Token:
    token = create_access_token(subject=str(user.id), email=user.email, role=user.role)
    return Token(access_token=token, user=UserOut.model_validate(user))

@router.get("/health")
def health():
    return {"status": "ok"}

@router.post("/auth/register", response_model=Token, status_code=201)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    """Create a new user and log them in"""
    if get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=400, detail="User already exists")

    user = create_user(db, email=user_in.email, password=user_in.password, role=user_in.role)
    logger.info("registered user %s with role %s", user.id, user.role)
    return _token_for(user)

@router.post("/auth/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """Authenticate user and return JWT"""
    user = get_user_by_email(db, form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        logger.warning("failed login for %s", form_data.username)
        raise AuthError("Invalid credentials")
    return _token_for(user)

@router.get("/auth/me", response_model=TokenClaims)
def me(claims: TokenClaims = Depends(get_current_user)):
    return claims
