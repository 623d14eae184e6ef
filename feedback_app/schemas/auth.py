# feedback_app/schemas/auth.py
from pydantic import BaseModel, field_validator
from feedback_app.models.user import ROLE_ADMIN
from feedback_app.schemas.user import UserOut

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut

class TokenClaims(BaseModel):
    sub: str
    email: str
    role: str

    @field_validator("sub")
    @classmethod
    def _numeric_subject(cls, v: str) -> str:
        if not v.isdigit():
            raise ValueError("subject must be a user id")
        return v

    @property
    def user_id(self) -> int:
        return int(self.sub)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
