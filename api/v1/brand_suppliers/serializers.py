"""
Serializers for Brand Supplier API endpoints.

The wire format uses camelCase keys; ``source`` maps them onto the
snake_case fields of the service layer.
"""

from rest_framework import serializers

from suppliers.application.commands.brand_supplier_input import BrandSupplierInput
from suppliers.application.queries.list_brand_suppliers import ListBrandSuppliersQuery


class BrandSupplierRequestSerializer(serializers.Serializer):
    """Serializer for create, replace (PUT) and partial update (PATCH) bodies."""

    name = serializers.CharField(min_length=1, max_length=100)
    contactPerson = serializers.CharField(
        source="contact_person",
        required=False,
        allow_null=True,
        min_length=1,
        max_length=100,
    )
    email = serializers.EmailField(max_length=100)
    phone = serializers.CharField(
        required=False, allow_null=True, min_length=10, max_length=10
    )
    address = serializers.CharField(required=False, allow_null=True)
    brandId = serializers.IntegerField(source="brand_id")
    isActive = serializers.BooleanField(source="is_active", required=False)

    def to_input(self) -> BrandSupplierInput:
        """Build the full-shape service input from validated data."""
        return BrandSupplierInput(**self.validated_data)


class BrandSupplierFilterSerializer(serializers.Serializer):
    """Serializer for the list endpoint query parameters."""

    brandId = serializers.IntegerField(source="brand_id", required=False)
    isActive = serializers.ChoiceField(
        source="is_active", choices=["true", "false"], required=False
    )

    def to_query(self) -> ListBrandSuppliersQuery:
        """Build the service query from validated parameters."""
        is_active = self.validated_data.get("is_active")
        return ListBrandSuppliersQuery(
            brand_id=self.validated_data.get("brand_id"),
            is_active=None if is_active is None else is_active == "true",
        )


class BrandSummarySerializer(serializers.Serializer):
    """Serializer for the brand embedded in a supplier."""

    brandId = serializers.IntegerField(source="brand_id")
    name = serializers.CharField()


class BrandSupplierSerializer(serializers.Serializer):
    """Serializer for BrandSupplier responses."""

    supplierId = serializers.IntegerField(source="id")
    name = serializers.CharField()
    contactPerson = serializers.CharField(source="contact_person", allow_null=True)
    email = serializers.EmailField()
    phone = serializers.CharField(allow_null=True)
    address = serializers.CharField(allow_null=True)
    isActive = serializers.BooleanField(source="is_active")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    brand = BrandSummarySerializer(allow_null=True)
