"""
BrandSupplier repository port (interface).

This defines the contract for supplier persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from suppliers.domain.brand_supplier import BrandSupplier


class BrandSupplierRepository(ABC):
    """
    Abstract repository for BrandSupplier entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Every returned supplier carries its embedded brand summary.
    """

    @abstractmethod
    async def find_by_id(self, supplier_id: int) -> Optional[BrandSupplier]:
        """
        Find a supplier by ID.

        Args:
            supplier_id: Supplier id

        Returns:
            BrandSupplier entity or None if not found
        """
        pass

    @abstractmethod
    async def find_many(
        self, brand_id: Optional[int] = None, is_active: Optional[bool] = None
    ) -> List[BrandSupplier]:
        """
        List suppliers matching every given filter.

        Args:
            brand_id: Exact brand id match, ignored when None
            is_active: Exact active flag match, ignored when None

        Returns:
            List of BrandSupplier entities ordered by id
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[BrandSupplier]:
        """
        Find a supplier by email.

        Args:
            email: Supplier email

        Returns:
            BrandSupplier entity or None if not found
        """
        pass

    @abstractmethod
    async def brand_exists(self, brand_id: int) -> bool:
        """
        Check if a brand exists.

        Args:
            brand_id: Brand id

        Returns:
            True if brand exists, False otherwise
        """
        pass

    @abstractmethod
    async def insert(self, supplier: BrandSupplier) -> BrandSupplier:
        """
        Persist a new supplier.

        Args:
            supplier: BrandSupplier without an id

        Returns:
            Stored BrandSupplier with its assigned id

        Raises:
            EmailAlreadyRegisteredError: If storage rejects the email as duplicate
        """
        pass

    @abstractmethod
    async def update(self, supplier_id: int, fields: Dict[str, Any]) -> BrandSupplier:
        """
        Overwrite the given fields of an existing supplier.

        Args:
            supplier_id: Supplier id
            fields: Field name to new value, including updated_at

        Returns:
            Updated BrandSupplier entity

        Raises:
            SupplierNotFoundError: If the supplier does not exist
            EmailAlreadyRegisteredError: If storage rejects the email as duplicate
        """
        pass

    @abstractmethod
    async def delete(self, supplier_id: int) -> None:
        """
        Permanently delete a supplier.

        Args:
            supplier_id: Supplier id

        Raises:
            SupplierNotFoundError: If the supplier does not exist
        """
        pass
