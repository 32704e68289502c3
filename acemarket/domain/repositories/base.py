"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, Optional, Any, Dict, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic record operations. Records are never deleted."""

    def get_by_id(self, id: str) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def create(self, obj_in: Dict[str, Any]) -> T:
        """Create a new entity."""
        ...

    def update(self, db_obj: T, obj_in: Dict[str, Any]) -> T:
        """Update an existing entity."""
        ...
