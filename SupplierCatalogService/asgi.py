"""
ASGI config for SupplierCatalogService project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "SupplierCatalogService.settings.dev")

application = get_asgi_application()
