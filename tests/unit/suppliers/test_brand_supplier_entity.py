"""
Unit tests for BrandSupplier domain entity.
"""

from datetime import datetime, timedelta, timezone

import pytest

from brands.domain.brand import BrandSummary
from suppliers.domain.brand_supplier import WRITABLE_FIELDS, BrandSupplier

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_supplier(**overrides):
    fields = {
        "name": "Acme Supplies",
        "email": "orders@acme.test",
        "brand_id": 1,
        "now": NOW,
    }
    fields.update(overrides)
    return BrandSupplier.create(**fields)


class TestBrandSupplierEntity:
    """Tests for BrandSupplier domain entity."""

    def test_create_supplier(self):
        """Test creating a supplier with required fields only."""
        supplier = make_supplier()

        assert supplier.id is None
        assert supplier.name == "Acme Supplies"
        assert supplier.contact_person is None
        assert supplier.phone is None
        assert supplier.address is None
        assert supplier.is_active is True
        assert supplier.created_at == NOW
        assert supplier.updated_at == NOW
        assert supplier.brand is None

    def test_create_inactive_supplier(self):
        """Test explicit active flag is kept."""
        assert make_supplier(is_active=False).is_active is False

    def test_name_is_stripped(self):
        """Test surrounding whitespace is removed from the name."""
        assert make_supplier(name="  Acme  ").name == "Acme"

    def test_invalid_name_empty(self):
        """Test invalid empty name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            make_supplier(name="   ")

    def test_invalid_name_too_long(self):
        """Test invalid name too long."""
        with pytest.raises(ValueError, match="too long"):
            make_supplier(name="x" * 101)

    def test_name_at_limit(self):
        """Test a 100 character name is accepted."""
        assert len(make_supplier(name="x" * 100).name) == 100

    def test_invalid_email(self):
        """Test invalid email is rejected."""
        with pytest.raises(ValueError, match="Invalid email"):
            make_supplier(email="not-an-email")

    @pytest.mark.parametrize("phone", ["12345", "12345678901"])
    def test_invalid_phone_length(self, phone):
        """Test phone must be exactly 10 characters."""
        with pytest.raises(ValueError, match="exactly 10"):
            make_supplier(phone=phone)

    def test_invalid_contact_person_empty(self):
        """Test empty contact person is rejected."""
        with pytest.raises(ValueError, match="Contact person"):
            make_supplier(contact_person="")

    def test_missing_brand(self):
        """Test brand id is required."""
        with pytest.raises(ValueError, match="Brand ID is required"):
            make_supplier(brand_id=None)

    def test_writable_fields(self):
        """Test writable fields snapshot."""
        supplier = make_supplier(phone="5551234567")
        assert set(supplier.writable_fields) == set(WRITABLE_FIELDS)
        assert supplier.writable_fields["phone"] == "5551234567"

    def test_diff_keeps_only_changed_values(self):
        """Test diff drops values equal to the current ones."""
        supplier = make_supplier(phone="5551234567")

        changes = supplier.diff({"name": "Acme Supplies", "phone": "5550000000"})

        assert changes == {"phone": "5550000000"}

    def test_diff_treats_null_as_a_value(self):
        """Test clearing an optional field counts as a change."""
        supplier = make_supplier(address="1 Main St")
        assert supplier.diff({"address": None}) == {"address": None}

    def test_diff_compares_stripped_name(self):
        """Test surrounding whitespace alone is not a change."""
        supplier = make_supplier(name="Acme Supplies")

        assert supplier.diff({"name": "  Acme Supplies "}) == {}
        assert supplier.diff({"name": " Acme Ltd "}) == {"name": "Acme Ltd"}

    def test_diff_rejects_unknown_fields(self):
        """Test diff refuses system-assigned fields."""
        supplier = make_supplier()
        with pytest.raises(ValueError, match="Unknown supplier fields: created_at"):
            supplier.diff({"created_at": NOW})

    def test_apply_changes(self):
        """Test applying changes returns a new entity."""
        supplier = make_supplier()
        later = NOW + timedelta(minutes=5)

        updated = supplier.apply({"name": "Acme Ltd"}, now=later)

        assert updated.name == "Acme Ltd"
        assert updated.created_at == NOW
        assert updated.updated_at == later
        assert supplier.name == "Acme Supplies"

    def test_apply_validates_result(self):
        """Test applying invalid changes raises."""
        supplier = make_supplier()
        with pytest.raises(ValueError, match="exactly 10"):
            supplier.apply({"phone": "123"}, now=NOW)

    def test_apply_brand_change_drops_summary(self):
        """Test the embedded brand is dropped when the brand changes."""
        supplier = BrandSupplier(
            id=7,
            name="Acme",
            contact_person=None,
            email="a@acme.test",
            phone=None,
            address=None,
            brand_id=1,
            is_active=True,
            created_at=NOW,
            updated_at=NOW,
            brand=BrandSummary(brand_id=1, name="Acme Brand"),
        )

        assert supplier.apply({"brand_id": 2}, now=NOW).brand is None
        assert supplier.apply({"name": "Acme 2"}, now=NOW).brand == supplier.brand
