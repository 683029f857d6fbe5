"""
Suppliers module - Brand supplier management.

This module handles:
- BrandSupplier entity and domain logic
- BrandSupplier repository (port)
- Supplier infrastructure (Django ORM adapters)
- BrandSupplierService (application layer)
"""
