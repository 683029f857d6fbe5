"""
Brand supplier service.

Application service behind the supplier API: email uniqueness,
brand reference checks, filtering, and partial vs full updates.
It does no logging; failures surface as domain exceptions.
"""
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from core.domain.exceptions import (
    BrandNotFoundError,
    EmailAlreadyRegisteredError,
    SupplierNotFoundError,
)
from core.domain.value_objects import ActingUser
from suppliers.application.commands.brand_supplier_input import BrandSupplierInput
from suppliers.application.queries.list_brand_suppliers import ListBrandSuppliersQuery
from suppliers.domain.brand_supplier import BrandSupplier
from suppliers.ports.brand_supplier_repository import BrandSupplierRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BrandSupplierService:
    """
    Service for managing brand suppliers.

    The email pre-check only narrows the race window; the repository
    raises EmailAlreadyRegisteredError when storage rejects a duplicate.
    """

    def __init__(
        self,
        repository: BrandSupplierRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize service.

        Args:
            repository: Supplier persistence port
            clock: Source of the current time (defaults to UTC now)
        """
        self.repository = repository
        self.clock = clock or _utcnow

    async def find_all(
        self, query: Optional[ListBrandSuppliersQuery] = None
    ) -> List[BrandSupplier]:
        """
        List suppliers matching all given filters.

        Args:
            query: Optional brand_id / is_active filters

        Returns:
            Matching suppliers, brand embedded
        """
        query = query or ListBrandSuppliersQuery()
        return await self.repository.find_many(
            brand_id=query.brand_id, is_active=query.is_active
        )

    async def find_one(self, supplier_id: int) -> BrandSupplier:
        """
        Get a supplier by id.

        Raises:
            SupplierNotFoundError: If no supplier has this id
        """
        supplier = await self.repository.find_by_id(supplier_id)
        if not supplier:
            raise SupplierNotFoundError(f"Supplier with ID {supplier_id} not found")
        return supplier

    async def create(self, data: BrandSupplierInput, acting_user: ActingUser) -> BrandSupplier:
        """
        Register a new supplier.

        Args:
            data: Supplier fields
            acting_user: Caller identity

        Returns:
            Stored supplier with its assigned id

        Raises:
            EmailAlreadyRegisteredError: If the email is already used
            BrandNotFoundError: If the brand does not exist
        """
        await self._ensure_email_available(data.email)
        await self._ensure_brand_exists(data.brand_id)

        supplier = BrandSupplier.create(
            name=data.name,
            email=data.email,
            brand_id=data.brand_id,
            now=self.clock(),
            contact_person=data.contact_person,
            phone=data.phone,
            address=data.address,
            is_active=data.is_active,
        )
        return await self.repository.insert(supplier)

    async def replace(
        self, supplier_id: int, data: BrandSupplierInput, acting_user: ActingUser
    ) -> BrandSupplier:
        """
        Overwrite every writable field of a supplier.

        Optional fields missing from ``data`` are stored as null.

        Raises:
            SupplierNotFoundError: If no supplier has this id
            EmailAlreadyRegisteredError: If another supplier uses the email
            BrandNotFoundError: If the brand does not exist
        """
        return await self._apply_changes(supplier_id, data.to_fields())

    async def update(
        self, supplier_id: int, changes: Mapping[str, Any], acting_user: ActingUser
    ) -> BrandSupplier:
        """
        Change only the fields present in ``changes``.

        Raises:
            SupplierNotFoundError: If no supplier has this id
            EmailAlreadyRegisteredError: If another supplier uses the email
            BrandNotFoundError: If the brand does not exist
        """
        return await self._apply_changes(supplier_id, changes)

    async def remove(self, supplier_id: int, acting_user: ActingUser) -> None:
        """
        Permanently delete a supplier.

        Raises:
            SupplierNotFoundError: If no supplier has this id
        """
        await self.find_one(supplier_id)
        await self.repository.delete(supplier_id)

    async def _apply_changes(self, supplier_id: int, fields: Mapping[str, Any]) -> BrandSupplier:
        """
        Shared routine for replace and update.

        Values equal to the stored ones are dropped; when nothing is
        left, storage is not touched and updated_at keeps its value.
        """
        current = await self.find_one(supplier_id)
        changes = current.diff(fields)
        if not changes:
            return current

        if "email" in changes:
            await self._ensure_email_available(changes["email"], exclude_id=supplier_id)
        if "brand_id" in changes:
            await self._ensure_brand_exists(changes["brand_id"])

        # Validates the resulting record before anything is written
        updated = current.apply(changes, now=self.clock())
        changes["updated_at"] = updated.updated_at
        return await self.repository.update(supplier_id, changes)

    async def _ensure_email_available(self, email: str, exclude_id: Optional[int] = None) -> None:
        existing = await self.repository.find_by_email(email)
        if existing and existing.id != exclude_id:
            raise EmailAlreadyRegisteredError()

    async def _ensure_brand_exists(self, brand_id: int) -> None:
        if not await self.repository.brand_exists(brand_id):
            raise BrandNotFoundError(f"Brand with ID {brand_id} not found")
