"""
Django management command to create test data for development and testing.

Creates:
- A superuser (admin/admin)
- A test brand
- An API key for the superuser
- Optionally, a sample supplier of the brand
"""

from asgiref.sync import async_to_sync
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from brands.domain.brand import Brand
from brands.infrastructure.models import ApiKey
from brands.infrastructure.models import Brand as BrandModel
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from core.domain.exceptions import EmailAlreadyRegisteredError
from core.domain.value_objects import ActingUser, UserRole
from suppliers.application.commands.brand_supplier_input import BrandSupplierInput
from suppliers.application.services.brand_supplier_service import BrandSupplierService
from suppliers.infrastructure.repositories.django_brand_supplier_repository import (
    DjangoBrandSupplierRepository,
)

User = get_user_model()


class Command(BaseCommand):
    """Command to create test data."""

    help = "Create test data (superuser, brand, API key, supplier)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--skip-supplier",
            action="store_true",
            help="Skip creating the sample supplier",
        )
        parser.add_argument(
            "--brand-name",
            type=str,
            default="Test Brand",
            help="Brand name (default: Test Brand)",
        )
        parser.add_argument(
            "--supplier-email",
            type=str,
            default="supplier@example.com",
            help="Sample supplier email (default: supplier@example.com)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        user = self.create_superuser()
        brand = self.create_brand(options["brand_name"])
        raw_key = self.create_api_key(user)

        if not options["skip_supplier"]:
            acting_user = ActingUser(
                user_id=user.pk, username=user.get_username(), role=UserRole.ADMIN
            )
            self.create_supplier(brand, options["supplier_email"], acting_user)

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("\nTest data ready"))
        self.stdout.write(f"  Brand: {brand.name} (ID {brand.id})")
        if raw_key:
            self.stdout.write(f"  API key: {raw_key}")
            self.stdout.write(
                self.style.WARNING("  Save this API key - it cannot be retrieved later!")
            )

    def create_superuser(self):
        """Create a superuser if it doesn't exist."""
        username = "admin"
        existing = User.objects.filter(username=username).first()
        if existing:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Superuser '{username}' already exists"))
            return existing

        user = User.objects.create_superuser(
            username=username, email="admin@example.com", password="admin"
        )
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created superuser: {username} / admin"))
        return user

    def create_brand(self, name: str) -> Brand:
        """Create a test brand unless one with this name exists."""
        brand_repo = DjangoBrandRepository()

        # pylint: disable=no-member
        existing = BrandModel.objects.filter(name=name).first()
        if existing:
            self.stdout.write(self.style.WARNING(f"Brand '{name}' already exists"))
            return async_to_sync(brand_repo.find_by_id)(existing.id)

        brand = async_to_sync(brand_repo.save)(Brand.create(name=name))
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created brand: {brand.name}"))
        return brand

    def create_api_key(self, user):
        """Create an admin API key for the user, returning the raw key."""
        # pylint: disable=no-member
        if ApiKey.objects.filter(user=user).exists():
            self.stdout.write(self.style.WARNING(f"API key already exists for '{user}'"))
            return None

        api_key = ApiKey.objects.create(user=user, role="admin")
        return api_key._raw_key  # pylint: disable=protected-access

    def create_supplier(self, brand: Brand, email: str, acting_user: ActingUser) -> None:
        """Create a sample supplier through the service layer."""
        service = BrandSupplierService(repository=DjangoBrandSupplierRepository())
        data = BrandSupplierInput(
            name="Sample Supplier",
            email=email,
            brand_id=brand.id,
            contact_person="Jane Doe",
            phone="5551234567",
        )
        try:
            supplier = async_to_sync(service.create)(data, acting_user)
        except EmailAlreadyRegisteredError:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Supplier '{email}' already exists"))
            return
        except ValueError as exc:
            raise CommandError(f"Invalid supplier data: {exc}") from exc
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created supplier: {supplier.name} (ID {supplier.id})"))
