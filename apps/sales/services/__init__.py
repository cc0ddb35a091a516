"""Services for sales business logic."""

from .exceptions import SalesServiceError, InvalidSaleStatusError
from .sale_management import create_sale, update_sale, mark_sale_paid, delete_sale

__all__ = [
    # Exceptions
    'SalesServiceError',
    'InvalidSaleStatusError',
    # Services
    'create_sale',
    'update_sale',
    'mark_sale_paid',
    'delete_sale',
]
