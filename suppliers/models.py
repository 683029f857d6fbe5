"""
Django model discovery for the suppliers app.
"""

from suppliers.infrastructure.models import BrandSupplier  # noqa: F401
