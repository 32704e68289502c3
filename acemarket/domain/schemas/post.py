"""Pydantic schemas for Post domain."""

from datetime import datetime
from typing import Annotated, Any, List, Literal, Optional

from pydantic import AfterValidator, Field, ValidationInfo, field_validator, model_validator

from acemarket.domain.post_rules import (
    INDUSTRIES,
    POST_TYPES,
    PROPERTY_TYPES,
    SIZE_UNITS,
    check_status,
    normalize_tags,
)
from acemarket.domain.schemas.base import CamelModel

PostType = Literal[POST_TYPES]
Tags = Annotated[list, AfterValidator(normalize_tags)]


class Location(CamelModel):
    city: str
    state: str
    address: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def require_city_and_state(cls, data):
        if isinstance(data, dict):
            city, state = data.get("city"), data.get("state")
            if not city or not state or not str(city).strip() or not str(state).strip():
                raise ValueError("Location must include city and state")
        return data


class PropertyDetails(CamelModel):
    property_type: Optional[Literal[PROPERTY_TYPES]] = None
    industry: Optional[List[Literal[INDUSTRIES]]] = None
    location: Optional[Location] = None
    size: Optional[float] = Field(default=None, gt=0, strict=True, allow_inf_nan=False)
    size_unit: Optional[Literal[SIZE_UNITS]] = None
    price: Optional[float] = Field(default=None, ge=0, strict=True, allow_inf_nan=False)


class PostCreate(CamelModel):
    type: PostType
    content: str
    status: Optional[str] = None
    property_details: Optional[PropertyDetails] = None
    tags: Optional[Tags] = None
    image: Optional[str] = None  # base64 / data URI, HAVE posts only

    @field_validator("content")
    @classmethod
    def content_required(cls, content: str) -> str:
        if not content.strip():
            raise ValueError("Content is required")
        return content

    @field_validator("status")
    @classmethod
    def status_matches_type(cls, status: Optional[str], info: ValidationInfo) -> Optional[str]:
        post_type = info.data.get("type")
        if status and post_type:
            check_status(post_type, status)
        return status or None


class PostUpdate(CamelModel):
    """Partial update: only the fields present in the request are applied.

    Values are taken as sent; they are checked against the stored post once
    the caller is known to own it.
    """
    status: Any = None
    price: Any = None
    tags: Any = None
    image: Any = None


class PostOwner(CamelModel):
    id: str = Field(alias="_id")
    username: str
    email: str
    avatar_url: Optional[str] = None


class PostRead(CamelModel):
    id: str = Field(alias="_id")
    type: str
    status: str
    content: str
    owner: PostOwner = Field(alias="userId")
    image_url: Optional[str] = None
    property_details: Optional[PropertyDetails] = None
    tags: Optional[List[str]] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class PostFilter(CamelModel):
    user_id: Optional[str] = None
    type: Optional[str] = None
    q: Optional[str] = None
