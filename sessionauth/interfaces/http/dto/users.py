from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class SignupRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        # Shape check only. Emails are stored and compared exactly as sent,
        # so no normalising validator such as EmailStr.
        local, sep, domain = value.partition("@")
        if not sep or not local or not domain or any(ch.isspace() for ch in value):
            raise PydanticCustomError(
                "email_invalid",
                "Email must look like name@domain",
                {},
            )
        return value

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("name_blank", "Name cannot be blank", {})
        return value


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)


class UpdateProfileRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("name_blank", "Name cannot be blank", {})
        return value


class MessageDTO(BaseModel):
    success: bool = True
    message: str


class SignupSuccessDTO(BaseModel):
    success: bool = True
    data: dict[str, str]


class IdentityDTO(BaseModel):
    session_id: str
    user_id: str
    name: str
    email: str


class ProfileDTO(BaseModel):
    success: bool = True
    data: IdentityDTO
