"""Services for catalog business logic."""

from .exceptions import (
    CatalogServiceError,
    InvalidLineItemError,
    CatalogItemNotFoundError,
)
from .line_items import (
    price_line_item,
    price_line_items,
    copy_line_items,
)

__all__ = [
    # Exceptions
    'CatalogServiceError',
    'InvalidLineItemError',
    'CatalogItemNotFoundError',
    # Services
    'price_line_item',
    'price_line_items',
    'copy_line_items',
]
