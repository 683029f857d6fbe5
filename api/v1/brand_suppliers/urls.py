"""
URL configuration for brand supplier API endpoints.
"""

from django.urls import path

from api.v1.brand_suppliers import views

app_name = "brand-suppliers"

urlpatterns = [
    path(
        "",
        views.BrandSupplierListView.as_view(),
        name="list",
    ),
    path(
        "<int:supplier_id>",
        views.BrandSupplierDetailView.as_view(),
        name="detail",
    ),
]
