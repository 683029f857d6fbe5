"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class SupplierException(DomainException):
    """Base exception for supplier-related errors."""

    pass


class SupplierNotFoundError(SupplierException):
    """Raised when a brand supplier is not found."""

    def __init__(self, message: str = "Supplier not found"):
        super().__init__(message, code="SUPPLIER_NOT_FOUND")


class EmailAlreadyRegisteredError(SupplierException):
    """Raised when a supplier email is already used by another supplier."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message, code="EMAIL_ALREADY_REGISTERED")


class BrandException(DomainException):
    """Base exception for brand-related errors."""

    pass


class BrandNotFoundError(BrandException):
    """Raised when a referenced brand does not exist."""

    def __init__(self, message: str = "Brand not found"):
        super().__init__(message, code="BRAND_NOT_FOUND")
