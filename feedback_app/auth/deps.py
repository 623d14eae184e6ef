# feedback_app/auth/deps.py
import logging
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from feedback_app.auth.jwt import decode_access_token
from feedback_app.core.errors import AuthError, PermissionDeniedError
from feedback_app.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

# auto_error=False so a missing header surfaces as our own AuthError
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

def get_current_user(token: str | None = Depends(oauth2_scheme)) -> TokenClaims:
    if not token:
        raise AuthError("No token provided")
    try:
        return decode_access_token(token)
    except AuthError:
        logger.warning("rejected bearer token")
        raise

def get_current_admin(claims: TokenClaims = Depends(get_current_user)) -> TokenClaims:
    if not claims.is_admin:
        logger.warning("user %s (role=%s) denied admin route", claims.sub, claims.role)
        raise PermissionDeniedError()
    return claims
