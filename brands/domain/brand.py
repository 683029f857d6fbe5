"""
Brand domain entity.

A brand owns zero or more suppliers. Suppliers only ever
reference a brand by id and embed a short summary of it.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    This is an immutable value object with business logic.
    """

    id: Optional[int]
    name: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate brand entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.name) > 100:
            raise ValueError("Brand name too long")

    @classmethod
    def create(cls, name: str, brand_id: Optional[int] = None) -> "Brand":
        """
        Create a new Brand entity.

        Args:
            name: Brand display name
            brand_id: Optional id (assigned by storage if not provided)

        Returns:
            Brand entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=brand_id,
            name=name.strip(),
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True)
class BrandSummary:
    """Brand as embedded in a supplier: id and name only."""

    brand_id: int
    name: str
