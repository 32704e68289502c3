"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from acemarket.domain.schemas.base import CamelModel


def _clean_specialties(specialties: Optional[List[str]]) -> Optional[List[str]]:
    if specialties is None:
        return None
    return [item.strip() for item in specialties if item and item.strip()]


class UserCreate(CamelModel):
    username: str
    email: str
    password: str
    avatar: Optional[str] = None  # base64 / data URI
    avatar_url: Optional[str] = None
    license_number: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    specialties: Optional[List[str]] = None
    is_realtor: bool = False

    @field_validator("username", "email", "password")
    @classmethod
    def required(cls, value: str, info) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return value if info.field_name == "password" else value.strip()

    @field_validator("specialties")
    @classmethod
    def clean_specialties(cls, specialties: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_specialties(specialties)


class UserUpdate(CamelModel):
    """Profile update — absent fields keep their stored value."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    avatar: Optional[str] = None
    avatar_url: Optional[str] = None  # empty string clears the avatar
    license_number: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    specialties: Optional[List[str]] = None
    is_realtor: Optional[bool] = None

    @field_validator("username", "email", "password")
    @classmethod
    def not_blank(cls, value: Optional[str], info) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError(f"{info.field_name.capitalize()} cannot be empty")
        if value is None or info.field_name == "password":
            return value
        return value.strip()

    @field_validator("specialties")
    @classmethod
    def clean_specialties(cls, specialties: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_specialties(specialties)


class UserRead(CamelModel):
    id: str
    username: str
    email: str
    avatar_url: Optional[str] = None
    license_number: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    specialties: List[str] = []
    is_realtor: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("specialties", mode="before")
    @classmethod
    def default_specialties(cls, value):
        return value or []


class LoginRequest(CamelModel):
    email: str
    password: str

    @field_validator("email", "password")
    @classmethod
    def required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Email and password required")
        return value


class AuthResponse(CamelModel):
    token: str
    user: UserRead
