"""
Request and response schemas for the user endpoints.

Response models serialize with camelCase keys and ``_id`` so the single-page
client keeps receiving the shape it was built against.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.models import UserRole

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")
PHONE_PATTERN = re.compile(r"^\d{10}$")
MIN_PASSWORD_LENGTH = 6


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email format")
    return value


def _check_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return value


def _check_phone(value: str) -> str:
    value = value.strip()
    if not PHONE_PATTERN.match(value):
        raise ValueError("Phone number must be exactly 10 digits")
    return value


# ============== Requests ==============


class RegisterRequest(BaseModel):
    """Registration form fields (the photo travels separately)."""

    fullname: str
    email: str
    phone_number: str
    password: str
    role: UserRole

    @model_validator(mode="before")
    @classmethod
    def require_all_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            required = ("fullname", "email", "phone_number", "password", "role")
            if any(_is_blank(data.get(name)) for name in required):
                raise ValueError("All fields are required")
        return data

    @field_validator("fullname")
    @classmethod
    def strip_fullname(cls, v: str) -> str:
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password(v)

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return _check_phone(v)


class LoginRequest(BaseModel):
    """JSON body of the login endpoint."""

    email: str
    password: str
    role: UserRole

    @model_validator(mode="before")
    @classmethod
    def require_all_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if any(_is_blank(data.get(name)) for name in ("email", "password", "role")):
                raise ValueError("Something is missing")
        return data

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password(v)


class ProfileUpdateRequest(BaseModel):
    """
    Partial profile update.

    ``None`` means "leave unchanged". Blank strings coming from the form are
    normalized to ``None``, so a field cannot be cleared through this model.
    """

    fullname: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[list[str]] = None

    @field_validator("fullname", "email", "phone_number", "bio", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, v: Any) -> Any:
        # "go, rust,c++" -> ["go", "rust", "c++"]
        if isinstance(v, str):
            v = [item.strip() for item in v.split(",")]
            v = [item for item in v if item]
            return v or None
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_email(v)

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_phone(v)


# ============== Responses ==============


class UserProfile(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    bio: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    profile_photo_url: Optional[str] = None
    resume_url: Optional[str] = None
    resume_original_filename: Optional[str] = None


class UserPublic(BaseModel):
    """Sanitized projection of a user (no password hash)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str = Field(alias="_id")
    fullname: str
    email: str
    phone_number: str
    role: UserRole
    profile: Optional[UserProfile] = None


class ApiResponse(BaseModel):
    """Envelope shared by every endpoint."""

    message: str
    success: bool = True


class UserEnvelope(ApiResponse):
    user: UserPublic
