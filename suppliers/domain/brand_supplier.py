"""
BrandSupplier domain entity.

This is the core domain entity representing a third-party supplier
associated with a brand. It is independent of infrastructure.
"""
import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from brands.domain.brand import BrandSummary
from core.domain.value_objects import Email, PhoneNumber

# Fields a caller may set; everything else is assigned by the system.
WRITABLE_FIELDS = (
    "name",
    "contact_person",
    "email",
    "phone",
    "address",
    "brand_id",
    "is_active",
)


@dataclass(frozen=True)
class BrandSupplier:
    """
    BrandSupplier domain entity.

    Represents a supplier belonging to exactly one brand.
    This is an immutable value object with business logic.
    """

    id: Optional[int]
    name: str
    contact_person: Optional[str]
    email: str
    phone: Optional[str]
    address: Optional[str]
    brand_id: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
    brand: Optional[BrandSummary] = None

    def __post_init__(self):
        """Validate supplier entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Supplier name cannot be empty")
        if len(self.name) > 100:
            raise ValueError("Supplier name too long")
        if self.contact_person is not None:
            if len(self.contact_person) == 0 or len(self.contact_person) > 100:
                raise ValueError("Contact person must be between 1 and 100 characters")
        Email(self.email)
        if self.phone is not None:
            PhoneNumber(self.phone)
        if not self.brand_id:
            raise ValueError("Brand ID is required")

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        brand_id: int,
        now: datetime,
        contact_person: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> "BrandSupplier":
        """
        Create a new, not yet persisted BrandSupplier.

        Args:
            name: Supplier display name
            email: Supplier email, unique across all suppliers
            brand_id: Id of the owning brand
            now: Creation timestamp, used for created_at and updated_at
            contact_person: Optional contact name
            phone: Optional 10 character phone number
            address: Optional postal address
            is_active: Active flag, defaults to True when None

        Returns:
            BrandSupplier entity without an id
        """
        return cls(
            id=None,
            name=name.strip(),
            contact_person=contact_person,
            email=email,
            phone=phone,
            address=address,
            brand_id=brand_id,
            is_active=True if is_active is None else is_active,
            created_at=now,
            updated_at=now,
        )

    @property
    def writable_fields(self) -> Dict[str, Any]:
        """Current values of every caller-settable field."""
        return {field: getattr(self, field) for field in WRITABLE_FIELDS}

    def diff(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Return the subset of ``fields`` whose value differs from this record.

        Args:
            fields: Mapping of writable field name to new value

        Returns:
            Dict of fields that would actually change

        Raises:
            ValueError: If a key is not a writable field
        """
        unknown = set(fields) - set(WRITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown supplier fields: {', '.join(sorted(unknown))}")
        fields = dict(fields)
        if isinstance(fields.get("name"), str):
            # Stored names are always stripped, as in create()
            fields["name"] = fields["name"].strip()
        return {
            field: value for field, value in fields.items() if getattr(self, field) != value
        }

    def apply(self, changes: Mapping[str, Any], now: datetime) -> "BrandSupplier":
        """
        Create a new BrandSupplier instance with ``changes`` applied.

        The brand summary is dropped when the brand changes; the
        repository reloads it.
        """
        brand = self.brand
        if "brand_id" in changes and changes["brand_id"] != self.brand_id:
            brand = None
        return dataclasses.replace(self, **dict(changes), updated_at=now, brand=brand)
