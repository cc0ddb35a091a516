"""Domain-specific exceptions for sales services."""


class SalesServiceError(Exception):
    """Base exception for sales services."""
    pass


class InvalidSaleStatusError(SalesServiceError):
    """Raised when a sale status change is not allowed."""
    pass
