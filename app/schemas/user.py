"""Pydantic schemas for signup, login and profile endpoints."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator, model_validator

from app.schemas.base import CamelModel, UTCDatetime

Role = Literal["customer", "restaurant"]

# Profile fields a restaurant must fill in at signup and may not clear later.
RESTAURANT_REQUIRED_FIELDS = ("location", "description", "contact_info", "timings")

# Restaurant-only columns; dropped from customer signups.
RESTAURANT_ONLY_FIELDS = ("description", "contact_info", "timings")


class SignupRequest(CamelModel):
    """Body for POST /api/auth/signup."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: Role

    profile_picture: Optional[str] = Field(None, max_length=1024)
    country: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=2)
    location: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    contact_info: Optional[str] = Field(None, max_length=255)
    timings: Optional[str] = Field(None, max_length=255)

    @model_validator(mode="after")
    def _restaurant_profile_complete(self) -> "SignupRequest":
        if self.role == "restaurant":
            missing = [
                f for f in RESTAURANT_REQUIRED_FIELDS
                if not (getattr(self, f) or "").strip()
            ]
            if missing:
                raise ValueError(
                    "Restaurant accounts require: " + ", ".join(missing)
                )
        else:
            for f in RESTAURANT_ONLY_FIELDS:
                setattr(self, f, None)
        if not self.name.strip():
            raise ValueError("Name must not be blank")
        return self


class LoginRequest(CamelModel):
    """
    Body for POST /api/auth/login.
    When role is given it must match the account's role.
    """

    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Optional[Role] = None


class ProfileUpdate(CamelModel):
    """
    Body for PUT /api/auth/profile: partial update.
    Email, role and password are not editable here; unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    profile_picture: Optional[str] = Field(None, max_length=1024)
    country: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=2)
    location: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    contact_info: Optional[str] = Field(None, max_length=255)
    timings: Optional[str] = Field(None, max_length=255)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("Name must not be blank")
        return value


class UserRead(CamelModel):
    """Public view of an account. Never carries the password hash."""

    id: int
    name: str
    email: str
    role: Role
    profile_picture: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact_info: Optional[str] = None
    timings: Optional[str] = None
    created_at: Optional[UTCDatetime] = None
    updated_at: Optional[UTCDatetime] = None


class UserEnvelope(CamelModel):
    user: UserRead


class UserMessageEnvelope(UserEnvelope):
    message: str
