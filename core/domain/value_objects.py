"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator

# Same rules as the EmailField the supplier table validates against
validate_email = EmailValidator()


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def __post_init__(self):
        """Validate email format."""
        if not self.value:
            raise ValueError(f"Invalid email address: {self.value}")
        if len(self.value) > 100:
            raise ValueError("Email address too long")
        try:
            validate_email(self.value)
        except ValidationError as exc:
            raise ValueError(f"Invalid email address: {self.value}") from exc

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """Supplier phone number, always exactly 10 characters."""

    value: str

    def __post_init__(self):
        if not self.value or len(self.value) != 10:
            raise ValueError(f"Phone number must be exactly 10 characters: {self.value}")

    def __str__(self) -> str:
        return self.value


class UserRole(Enum):
    """Role of the user acting on the API."""

    ADMIN = "admin"
    MANAGER = "manager"
    VIEWER = "viewer"

    def __str__(self) -> str:
        """Return role as string."""
        return self.value


@dataclass(frozen=True)
class ActingUser(ValueObject):
    """
    Identity of the caller of a mutating operation.

    Passed explicitly through the service layer for audit and
    authorization decisions instead of reading ambient request state.
    """

    user_id: int
    username: str
    role: UserRole = UserRole.MANAGER

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"
