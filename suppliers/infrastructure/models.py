"""
Brand supplier model.
"""

from django.db import models


class BrandSupplier(models.Model):
    """
    Represents a third-party supplier of a brand.

    Timestamps are assigned by the service layer rather than
    auto_now so that no-op updates leave updated_at untouched.
    """

    brand = models.ForeignKey(
        "brands.Brand", on_delete=models.PROTECT, related_name="suppliers"
    )
    name = models.CharField(max_length=100, help_text="Supplier display name")
    contact_person = models.CharField(max_length=100, null=True, blank=True)
    email = models.EmailField(max_length=100, unique=True)
    phone = models.CharField(max_length=10, null=True, blank=True)
    address = models.TextField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        db_table = "brand_suppliers"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["brand", "is_active"], name="supplier_brand_active_idx"),
            models.Index(fields=["is_active"], name="supplier_active_idx"),
        ]

    def clean(self):
        """Validate supplier fields."""
        from django.core.exceptions import ValidationError

        if self.phone is not None and len(self.phone) != 10:
            raise ValidationError({"phone": "Phone must be exactly 10 characters"})

    def save(self, *args, **kwargs):
        """Save with validation; email uniqueness is left to the database."""
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} <{self.email}>"
