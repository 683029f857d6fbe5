"""
Django implementation of BrandSupplierRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import Any, Dict, List, Optional

from asgiref.sync import sync_to_async
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from brands.domain.brand import BrandSummary
from brands.infrastructure.models import Brand as BrandModel
from core.domain.exceptions import (
    BrandNotFoundError,
    EmailAlreadyRegisteredError,
    SupplierNotFoundError,
)
from suppliers.domain.brand_supplier import BrandSupplier
from suppliers.infrastructure.models import BrandSupplier as BrandSupplierModel
from suppliers.ports.brand_supplier_repository import BrandSupplierRepository


class DjangoBrandSupplierRepository(BrandSupplierRepository):
    """
    Django ORM implementation of BrandSupplierRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Translates storage constraint violations into domain exceptions
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandSupplierModel) -> BrandSupplier:
        """
        Convert Django model to domain entity.

        Args:
            model: Django BrandSupplier model with its brand loaded

        Returns:
            BrandSupplier domain entity
        """
        return BrandSupplier(
            id=model.id,
            name=model.name,
            contact_person=model.contact_person,
            email=model.email,
            phone=model.phone,
            address=model.address,
            brand_id=model.brand_id,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
            brand=BrandSummary(brand_id=model.brand.id, name=model.brand.name),
        )

    def _queryset(self):
        # pylint: disable=no-member
        return BrandSupplierModel.objects.select_related("brand")

    def _reload(self, supplier_id: int) -> BrandSupplier:
        return self._to_domain(self._queryset().get(id=supplier_id))

    def _save(self, model: BrandSupplierModel) -> None:
        """
        Save a model inside a savepoint, translating constraint errors.

        Raises:
            EmailAlreadyRegisteredError: Email taken by another supplier
            BrandNotFoundError: Brand reference does not resolve
            ValueError: Any other field rejected by model validation
        """
        try:
            with transaction.atomic():
                model.save()
        except IntegrityError as exc:
            # pylint: disable=no-member
            taken = (
                BrandSupplierModel.objects.filter(email=model.email)
                .exclude(id=model.id)
                .exists()
            )
            if taken:
                raise EmailAlreadyRegisteredError() from exc
            raise
        except ValidationError as exc:
            if "brand" in getattr(exc, "error_dict", {}):
                raise BrandNotFoundError(f"Brand with ID {model.brand_id} not found") from exc
            raise ValueError("; ".join(exc.messages)) from exc

    @sync_to_async
    def find_by_id(self, supplier_id: int) -> Optional[BrandSupplier]:
        """
        Find a supplier by ID.

        Args:
            supplier_id: Supplier id

        Returns:
            BrandSupplier entity or None if not found
        """
        try:
            return self._reload(supplier_id)
        except BrandSupplierModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def find_many(
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
        qs = self._queryset()
        if brand_id is not None:
            qs = qs.filter(brand_id=brand_id)
        if is_active is not None:
            qs = qs.filter(is_active=is_active)
        return [self._to_domain(model) for model in qs.order_by("id")]

    @sync_to_async
    def find_by_email(self, email: str) -> Optional[BrandSupplier]:
        """
        Find a supplier by email.

        Args:
            email: Supplier email

        Returns:
            BrandSupplier entity or None if not found
        """
        model = self._queryset().filter(email=email).first()
        if model is None:
            return None
        return self._to_domain(model)

    @sync_to_async
    def brand_exists(self, brand_id: int) -> bool:
        """
        Check if a brand exists.

        Args:
            brand_id: Brand id

        Returns:
            True if brand exists, False otherwise
        """
        # pylint: disable=no-member
        return BrandModel.objects.filter(id=brand_id).exists()

    @sync_to_async
    def insert(self, supplier: BrandSupplier) -> BrandSupplier:
        """
        Persist a new supplier.

        Args:
            supplier: BrandSupplier without an id

        Returns:
            Stored BrandSupplier with its assigned id and brand
        """
        model = BrandSupplierModel(
            brand_id=supplier.brand_id,
            name=supplier.name,
            contact_person=supplier.contact_person,
            email=supplier.email,
            phone=supplier.phone,
            address=supplier.address,
            is_active=supplier.is_active,
            created_at=supplier.created_at,
            updated_at=supplier.updated_at,
        )
        self._save(model)
        return self._reload(model.id)

    @sync_to_async
    def update(self, supplier_id: int, fields: Dict[str, Any]) -> BrandSupplier:
        """
        Overwrite the given fields of an existing supplier.

        Args:
            supplier_id: Supplier id
            fields: Field name to new value

        Returns:
            Updated BrandSupplier entity
        """
        try:
            # pylint: disable=no-member
            model = BrandSupplierModel.objects.get(id=supplier_id)
        except BrandSupplierModel.DoesNotExist as exc:  # pylint: disable=no-member
            raise SupplierNotFoundError(f"Supplier with ID {supplier_id} not found") from exc

        for field, value in fields.items():
            setattr(model, field, value)
        self._save(model)
        return self._reload(supplier_id)

    @sync_to_async
    def delete(self, supplier_id: int) -> None:
        """
        Permanently delete a supplier.

        Args:
            supplier_id: Supplier id
        """
        # pylint: disable=no-member
        deleted, _ = BrandSupplierModel.objects.filter(id=supplier_id).delete()
        if not deleted:
            raise SupplierNotFoundError(f"Supplier with ID {supplier_id} not found")
