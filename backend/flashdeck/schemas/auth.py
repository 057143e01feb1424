from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class _Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, email: str) -> str:
        # accounts are looked up case-insensitively
        return email.lower()


class LoginRequest(_Credentials):
    pass


class RegisterRequest(_Credentials):
    username: str = Field(default="user", min_length=1, max_length=255)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    username: str
