"""
Django admin configuration for suppliers app.
"""

from django.contrib import admin

from suppliers.infrastructure.models import BrandSupplier


@admin.register(BrandSupplier)
class BrandSupplierAdmin(admin.ModelAdmin):
    """Admin interface for BrandSupplier model."""

    list_display = ["name", "email", "brand", "contact_person", "is_active", "updated_at"]
    list_filter = ["is_active", "brand"]
    search_fields = ["name", "email", "contact_person"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "brand", "name", "is_active"),
            },
        ),
        (
            "Contact",
            {
                "fields": ("contact_person", "email", "phone", "address"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("brand")

    def save_model(self, request, obj, form, change):
        """Stamp timestamps the way the service layer does."""
        from django.utils import timezone

        now = timezone.now()
        if not change:
            obj.created_at = now
        obj.updated_at = now
        super().save_model(request, obj, form, change)
