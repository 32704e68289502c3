"""Pydantic schemas for the feed filter."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from acemarket.domain.feed_ranges import ALL, PRICE_RANGES, SIZE_RANGES


class FeedFilter(BaseModel):
    type: Literal["ALL", "NEED", "HAVE"] = ALL
    price_range: str = Field(ALL, alias="price")
    size_range: str = Field(ALL, alias="size")
    search: str = ""
    user_id: Optional[str] = Field(None, alias="userId")

    model_config = {"populate_by_name": True}

    @field_validator("price_range")
    @classmethod
    def known_price_range(cls, value: str) -> str:
        if value != ALL and value not in PRICE_RANGES:
            raise ValueError(f"Unknown price range: {value}")
        return value

    @field_validator("size_range")
    @classmethod
    def known_size_range(cls, value: str) -> str:
        if value != ALL and value not in SIZE_RANGES:
            raise ValueError(f"Unknown size range: {value}")
        return value
