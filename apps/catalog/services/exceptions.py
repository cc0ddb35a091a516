"""Domain-specific exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog services."""
    pass


class InvalidLineItemError(CatalogServiceError):
    """Raised when a quote or sale line cannot be priced."""
    pass


class CatalogItemNotFoundError(CatalogServiceError):
    """Raised when a referenced product or service is not in the company catalog."""
    pass
