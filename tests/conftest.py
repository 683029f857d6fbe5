"""
Pytest configuration and shared fixtures.
"""

import dataclasses
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from asgiref.sync import async_to_sync

from brands.domain.brand import Brand, BrandSummary
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from core.domain.exceptions import EmailAlreadyRegisteredError, SupplierNotFoundError
from core.domain.value_objects import ActingUser, UserRole
from suppliers.infrastructure.repositories.django_brand_supplier_repository import (
    DjangoBrandSupplierRepository,
)
from suppliers.ports.brand_supplier_repository import BrandSupplierRepository


class InMemoryBrandSupplierRepository(BrandSupplierRepository):
    """
    Dict-backed repository for service tests.

    Ids come from a counter and are never reused. The email
    constraint is enforced like the database does it.
    """

    def __init__(self, brands=None):
        self.brands = dict(brands or {})
        self.suppliers = {}
        self.writes = 0
        self._next_id = 1

    def _with_brand(self, supplier):
        name = self.brands[supplier.brand_id]
        return dataclasses.replace(
            supplier, brand=BrandSummary(brand_id=supplier.brand_id, name=name)
        )

    def _check_email(self, email, supplier_id):
        for other in self.suppliers.values():
            if other.email == email and other.id != supplier_id:
                raise EmailAlreadyRegisteredError()

    async def find_by_id(self, supplier_id):
        return self.suppliers.get(supplier_id)

    async def find_many(self, brand_id=None, is_active=None):
        return [
            supplier
            for _, supplier in sorted(self.suppliers.items())
            if (brand_id is None or supplier.brand_id == brand_id)
            and (is_active is None or supplier.is_active == is_active)
        ]

    async def find_by_email(self, email):
        for supplier in self.suppliers.values():
            if supplier.email == email:
                return supplier
        return None

    async def brand_exists(self, brand_id):
        return brand_id in self.brands

    async def insert(self, supplier):
        self._check_email(supplier.email, None)
        stored = self._with_brand(dataclasses.replace(supplier, id=self._next_id))
        self._next_id += 1
        self.suppliers[stored.id] = stored
        self.writes += 1
        return stored

    async def update(self, supplier_id, fields):
        if supplier_id not in self.suppliers:
            raise SupplierNotFoundError(f"Supplier with ID {supplier_id} not found")
        if "email" in fields:
            self._check_email(fields["email"], supplier_id)
        stored = self._with_brand(dataclasses.replace(self.suppliers[supplier_id], **fields))
        self.suppliers[supplier_id] = stored
        self.writes += 1
        return stored

    async def delete(self, supplier_id):
        if self.suppliers.pop(supplier_id, None) is None:
            raise SupplierNotFoundError(f"Supplier with ID {supplier_id} not found")
        self.writes += 1


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds=60):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def supplier_repository():
    """Fixture for BrandSupplierRepository."""
    return DjangoBrandSupplierRepository()


@pytest.fixture
def memory_repository():
    """In-memory supplier repository knowing brands 1 (Acme) and 2 (Globex)."""
    return InMemoryBrandSupplierRepository(brands={1: "Acme", 2: "Globex"})


@pytest.fixture
def clock():
    """Controllable clock."""
    return FakeClock()


@pytest.fixture
def acting_user():
    """Fixture for the user performing mutations."""
    return ActingUser(user_id=1, username="tester", role=UserRole.MANAGER)


@pytest.fixture
def sample_brand():
    """Fixture for a sample, unsaved Brand entity."""
    unique_id = str(uuid.uuid4())[:8]
    return Brand.create(name=f"TestBrand{unique_id}")


@pytest.fixture
def db_brand(db, brand_repository, sample_brand):
    """Fixture for a Brand saved in database."""
    return async_to_sync(brand_repository.save)(sample_brand)


@pytest.fixture
def other_db_brand(db, brand_repository):
    """Fixture for a second Brand saved in database."""
    return async_to_sync(brand_repository.save)(Brand.create(name="Other Brand"))


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def api_user(db):
    """Fixture for the Django user owning the API key."""
    from django.contrib.auth import get_user_model

    return get_user_model().objects.create_user(username="api-user", password="secret")


@pytest.fixture
def raw_api_key(api_user):
    """Fixture for a raw API key of ``api_user``."""
    from brands.infrastructure.models import ApiKey

    api_key = ApiKey.objects.create(user=api_user, role="manager")
    return api_key._raw_key  # pylint: disable=protected-access


@pytest.fixture
def auth_client(api_client, raw_api_key):
    """Fixture for an API client sending a valid API key."""
    api_client.credentials(HTTP_X_API_KEY=raw_api_key)
    return api_client
