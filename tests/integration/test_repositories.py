"""
Integration tests for repository implementations.

Repository methods are async; they are driven through ``async_to_sync``
so the ORM work runs on the test's own database connection.
"""

from datetime import datetime, timezone

import pytest
from asgiref.sync import async_to_sync

from brands.domain.brand import Brand
from core.domain.exceptions import (
    BrandNotFoundError,
    EmailAlreadyRegisteredError,
    SupplierNotFoundError,
)
from suppliers.application.commands.brand_supplier_input import BrandSupplierInput
from suppliers.application.services.brand_supplier_service import BrandSupplierService
from suppliers.domain.brand_supplier import BrandSupplier

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def new_supplier(brand_id, email="a@x.com", **overrides):
    return BrandSupplier.create(
        name=overrides.pop("name", "Supplier A"),
        email=email,
        brand_id=brand_id,
        now=NOW,
        **overrides,
    )


@pytest.mark.django_db
@pytest.mark.integration
class TestBrandRepository:
    """Integration tests for BrandRepository."""

    def test_save_and_find(self, brand_repository):
        """Test saving and finding a brand."""
        saved = async_to_sync(brand_repository.save)(Brand.create(name="Test Brand"))
        assert saved.id is not None

        found = async_to_sync(brand_repository.find_by_id)(saved.id)
        assert found is not None
        assert found.name == "Test Brand"

    def test_find_not_found(self, brand_repository):
        """Test finding non-existent brand."""
        assert async_to_sync(brand_repository.find_by_id)(999999) is None

    def test_exists(self, brand_repository, db_brand):
        """Test checking brand existence."""
        assert async_to_sync(brand_repository.exists)(db_brand.id) is True
        assert async_to_sync(brand_repository.exists)(999999) is False

    def test_rename(self, brand_repository, db_brand):
        """Test saving an existing brand updates it."""
        renamed = Brand(
            id=db_brand.id,
            name="Renamed",
            created_at=db_brand.created_at,
            updated_at=db_brand.updated_at,
        )
        async_to_sync(brand_repository.save)(renamed)

        assert async_to_sync(brand_repository.find_by_id)(db_brand.id).name == "Renamed"

    def test_list_all(self, brand_repository, db_brand, other_db_brand):
        """Test listing brands."""
        ids = {brand.id for brand in async_to_sync(brand_repository.list_all)()}
        assert {db_brand.id, other_db_brand.id} <= ids


@pytest.mark.django_db
@pytest.mark.integration
class TestBrandSupplierRepository:
    """Integration tests for BrandSupplierRepository."""

    def test_insert_and_find(self, supplier_repository, db_brand):
        """Test inserting a supplier assigns an id and embeds the brand."""
        saved = async_to_sync(supplier_repository.insert)(
            new_supplier(db_brand.id, phone="1234567890")
        )

        assert saved.id is not None
        assert saved.created_at == NOW
        assert saved.brand.brand_id == db_brand.id
        assert saved.brand.name == db_brand.name

        found = async_to_sync(supplier_repository.find_by_id)(saved.id)
        assert found == saved

    def test_find_by_id_not_found(self, supplier_repository):
        """Test finding non-existent supplier."""
        assert async_to_sync(supplier_repository.find_by_id)(999999) is None

    def test_find_by_email(self, supplier_repository, db_brand):
        """Test lookup by exact email."""
        saved = async_to_sync(supplier_repository.insert)(new_supplier(db_brand.id))

        assert async_to_sync(supplier_repository.find_by_email)("a@x.com").id == saved.id
        assert async_to_sync(supplier_repository.find_by_email)("b@x.com") is None

    def test_find_many_filters(self, supplier_repository, db_brand, other_db_brand):
        """Test filters are combined and results are ordered by id."""
        first = async_to_sync(supplier_repository.insert)(new_supplier(db_brand.id))
        inactive = async_to_sync(supplier_repository.insert)(
            new_supplier(db_brand.id, email="b@x.com", is_active=False)
        )
        other = async_to_sync(supplier_repository.insert)(
            new_supplier(other_db_brand.id, email="c@x.com")
        )
        find_many = async_to_sync(supplier_repository.find_many)

        assert [s.id for s in find_many()] == [first.id, inactive.id, other.id]
        assert [s.id for s in find_many(brand_id=db_brand.id)] == [first.id, inactive.id]
        assert [s.id for s in find_many(is_active=False)] == [inactive.id]
        assert [s.id for s in find_many(brand_id=other_db_brand.id, is_active=False)] == []

    def test_brand_exists(self, supplier_repository, db_brand):
        """Test brand lookup from the supplier side."""
        assert async_to_sync(supplier_repository.brand_exists)(db_brand.id) is True
        assert async_to_sync(supplier_repository.brand_exists)(999999) is False

    def test_insert_duplicate_email(self, supplier_repository, db_brand):
        """Test the unique constraint surfaces as a domain conflict."""
        async_to_sync(supplier_repository.insert)(new_supplier(db_brand.id))

        with pytest.raises(EmailAlreadyRegisteredError):
            async_to_sync(supplier_repository.insert)(
                new_supplier(db_brand.id, name="Supplier B")
            )
        assert len(async_to_sync(supplier_repository.find_many)()) == 1

    def test_insert_unknown_brand(self, supplier_repository):
        """Test a dangling brand reference is rejected."""
        with pytest.raises(BrandNotFoundError):
            async_to_sync(supplier_repository.insert)(new_supplier(999999))

    def test_update_fields(self, supplier_repository, db_brand, other_db_brand):
        """Test updating only the given fields."""
        saved = async_to_sync(supplier_repository.insert)(
            new_supplier(db_brand.id, address="1 Main St")
        )
        later = datetime(2024, 2, 1, tzinfo=timezone.utc)

        updated = async_to_sync(supplier_repository.update)(
            saved.id,
            {"brand_id": other_db_brand.id, "address": None, "updated_at": later},
        )

        assert updated.brand.name == "Other Brand"
        assert updated.address is None
        assert updated.name == saved.name
        assert updated.created_at == NOW
        assert updated.updated_at == later

    def test_update_duplicate_email(self, supplier_repository, db_brand):
        """Test moving onto a taken email conflicts."""
        async_to_sync(supplier_repository.insert)(new_supplier(db_brand.id))
        second = async_to_sync(supplier_repository.insert)(
            new_supplier(db_brand.id, email="b@x.com")
        )

        with pytest.raises(EmailAlreadyRegisteredError):
            async_to_sync(supplier_repository.update)(second.id, {"email": "a@x.com"})

    def test_update_not_found(self, supplier_repository):
        """Test updating a missing supplier."""
        with pytest.raises(SupplierNotFoundError):
            async_to_sync(supplier_repository.update)(999999, {"name": "Nope"})

    def test_update_invalid_field_value(self, supplier_repository, db_brand):
        """Test model validation failures surface as ValueError."""
        saved = async_to_sync(supplier_repository.insert)(new_supplier(db_brand.id))

        with pytest.raises(ValueError):
            async_to_sync(supplier_repository.update)(saved.id, {"email": "a..b@x.com"})
        assert async_to_sync(supplier_repository.find_by_id)(saved.id).email == "a@x.com"

    def test_delete(self, supplier_repository, db_brand):
        """Test deleting a supplier."""
        saved = async_to_sync(supplier_repository.insert)(new_supplier(db_brand.id))

        async_to_sync(supplier_repository.delete)(saved.id)

        assert async_to_sync(supplier_repository.find_by_id)(saved.id) is None
        with pytest.raises(SupplierNotFoundError):
            async_to_sync(supplier_repository.delete)(saved.id)


@pytest.mark.django_db
@pytest.mark.integration
class TestBrandSupplierServiceStorage:
    """BrandSupplierService running on the Django repository."""

    @pytest.fixture
    def service(self, supplier_repository):
        """Service wired to the database."""
        return BrandSupplierService(repository=supplier_repository)

    def test_create_rejects_email_the_column_refuses(
        self, service, supplier_repository, db_brand, acting_user
    ):
        """Test malformed emails fail validation instead of reaching the ORM."""
        data = BrandSupplierInput(name="S", email="a..b@x.com", brand_id=db_brand.id)

        with pytest.raises(ValueError, match="Invalid email"):
            async_to_sync(service.create)(data, acting_user)
        assert async_to_sync(supplier_repository.find_many)() == []

    def test_replace_with_create_input_is_noop(self, service, db_brand, acting_user):
        """Test replacing with the exact create input keeps the stored record."""
        data = BrandSupplierInput(name=" Acme Co ", email="a@x.com", brand_id=db_brand.id)
        created = async_to_sync(service.create)(data, acting_user)

        replaced = async_to_sync(service.replace)(created.id, data, acting_user)

        assert replaced.name == created.name == "Acme Co"
        assert replaced.updated_at == created.updated_at
