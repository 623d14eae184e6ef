# feedback_app/schemas/user.py
from typing import Literal
from pydantic import BaseModel, EmailStr, Field, field_validator

class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    role: Literal["admin", "user"] = "user"

    @field_validator("email")
    @classmethod
    def _lower(cls, v: str) -> str:
        return v.lower()

class UserOut(BaseModel):
    id: int
    email: EmailStr
    role: str

    class Config:
        from_attributes = True  # pydantic v2: allow ORM objects
