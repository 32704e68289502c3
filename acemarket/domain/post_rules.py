"""
Post rules shared by the create and update paths.

The status vocabulary is keyed by post type. Statuses form a flat validity set:
any status of a type's vocabulary may follow any other.
"""

import math
from typing import Any, List, Optional

POST_TYPES = ("NEED", "HAVE")

STATUS_VOCABULARY = {
    "HAVE": ("active", "pending", "sold", "leased", "withdrawn"),
    "NEED": ("active", "paused", "closed"),
}
DEFAULT_STATUS = "active"

PROPERTY_TYPES = ("Office", "Retail", "Industrial", "Land", "Multifamily")

INDUSTRIES = (
    "Healthcare",
    "Logistics",
    "Food & Beverage",
    "Technology",
    "Manufacturing",
    "Hospitality",
    "Financial Services",
    "Education",
    "Other",
)

SIZE_UNITS = ("sqft", "acres")
SQFT_PER_ACRE = 43560

MAX_TAGS = 10


class PostRuleViolation(ValueError):
    """A post field broke one of the rules below."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


def allowed_statuses(post_type: str) -> tuple:
    return STATUS_VOCABULARY.get(post_type, ())


def check_status(post_type: str, status: str) -> str:
    if status not in allowed_statuses(post_type):
        raise PostRuleViolation("status", "Invalid status for this post type")
    return status


def resolve_status(post_type: str, status: Optional[str]) -> str:
    """Status to store at creation: the validated value, or the default."""
    if not status:
        return DEFAULT_STATUS
    return check_status(post_type, status)


def normalize_tags(tags: Any) -> List[str]:
    """Trim every tag; reject blanks, non-strings and more than MAX_TAGS entries."""
    if not isinstance(tags, list):
        raise PostRuleViolation("tags", "Tags must be an array")
    if any(not isinstance(tag, str) or not tag.strip() for tag in tags):
        raise PostRuleViolation("tags", "All tags must be non-empty strings")
    if len(tags) > MAX_TAGS:
        raise PostRuleViolation("tags", f"Maximum {MAX_TAGS} tags allowed")
    return [tag.strip() for tag in tags]


def check_price(price: Any) -> float:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise PostRuleViolation("price", "Price must be a non-negative number")
    if not math.isfinite(price) or price < 0:
        raise PostRuleViolation("price", "Price must be a non-negative number")
    return price


def check_image(image: Any) -> Optional[str]:
    """Image payload of an update: a data URI, or empty/None to remove it."""
    if image is not None and not isinstance(image, str):
        raise PostRuleViolation("image", "Image must be a base64 string")
    return image or None


def apply_price(property_details: Optional[dict], price: float) -> dict:
    """Return a copy of the property details with only the price replaced."""
    if property_details is None:
        raise PostRuleViolation("price", "Cannot set price - post has no property details")
    updated = dict(property_details)
    updated["price"] = price
    return updated
