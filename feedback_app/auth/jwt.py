# feedback_app/auth/jwt.py
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import ValidationError
from feedback_app.core.config import settings
from feedback_app.core.errors import AuthError
from feedback_app.schemas.auth import TokenClaims

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
ALGORITHM = "HS256"

def create_access_token(subject: str, email: str, role: str, expires_minutes: int | None = None) -> str:
    expire_delta = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    payload = {
        "sub": str(subject),
        "email": email,
        "role": role,
        "exp": datetime.now(tz=timezone.utc) + timedelta(minutes=expire_delta),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> TokenClaims:
    """Verify signature and expiry; raise AuthError for anything unusable."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        claims = TokenClaims.model_validate(payload)
    except (JWTError, ValidationError, ValueError) as exc:
        raise AuthError("Invalid or expired token") from exc
    return claims

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
