"""
BrandSupplierInput.

Full set of writable supplier fields, as accepted by create and replace.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class BrandSupplierInput:
    """Command payload to create or fully replace a supplier."""

    name: str
    email: str
    brand_id: int
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    is_active: Optional[bool] = None

    def to_fields(self) -> Dict[str, Any]:
        """
        Every writable field with its value.

        Omitted optional fields are explicit nulls; an omitted
        active flag falls back to True.
        """
        return {
            "name": self.name,
            "contact_person": self.contact_person,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "brand_id": self.brand_id,
            "is_active": True if self.is_active is None else self.is_active,
        }
