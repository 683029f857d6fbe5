"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import List, Optional

from asgiref.sync import sync_to_async

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model

        Returns:
            Brand domain entity
        """
        return Brand(
            id=model.id,
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, brand: Brand) -> BrandModel:
        """
        Convert domain entity to Django model.

        Args:
            brand: Brand domain entity

        Returns:
            Django Brand model, unsaved
        """
        if brand.id is None:
            return BrandModel(name=brand.name)
        # pylint: disable=no-member
        model, created = BrandModel.objects.get_or_create(
            id=brand.id, defaults={"name": brand.name}
        )
        if not created:
            model.name = brand.name
        return model

    @sync_to_async
    def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        model = self._to_model(brand)
        model.save()
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, brand_id: int) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand id

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = BrandModel.objects.get(id=brand_id)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None
        return self._to_domain(model)

    @sync_to_async
    def exists(self, brand_id: int) -> bool:
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
    def list_all(self) -> List[Brand]:
        """
        List all brands.

        Returns:
            List of Brand entities
        """
        # pylint: disable=no-member
        return [self._to_domain(model) for model in BrandModel.objects.all()]
