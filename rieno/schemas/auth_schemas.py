import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Email and password are required")
        if not EMAIL_RE.match(value):
            raise ValueError("Please enter a valid email address")
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Email and password are required")
        return value

class SignupRequest(LoginRequest):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return value

def public_profile(user: dict) -> dict:
    return {
        "id": user["id"],
        "email": user["email"],
        "createdAt": user.get("created_at"),
    }
