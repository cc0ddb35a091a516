"""Services for quotes business logic."""

from .exceptions import (
    QuotesServiceError,
    QuoteNotFoundError,
    ClientNotFoundError,
    QuoteAlreadyConvertedError,
    InvalidQuoteStatusError,
    InvalidPaymentAmountError,
    InvalidPaymentMethodError,
    PaymentNotFoundError,
    InvalidProductionStatusError,
    InvalidProductionTransitionError,
    SaleNotFoundError,
)
from .lookup import get_quote, get_sale, resolve_client
from .payment_ledger import (
    compute_payment_status,
    add_payment,
    remove_payment,
    payment_summary,
)
from .quote_management import create_quote, update_quote, delete_quote
from .conversion import convert_quote_to_sale
from .production import (
    validate_production_transition,
    set_quote_production_status,
    set_sale_production_status,
    production_notification,
)

__all__ = [
    # Exceptions
    'QuotesServiceError',
    'QuoteNotFoundError',
    'ClientNotFoundError',
    'QuoteAlreadyConvertedError',
    'InvalidQuoteStatusError',
    'InvalidPaymentAmountError',
    'InvalidPaymentMethodError',
    'PaymentNotFoundError',
    'InvalidProductionStatusError',
    'InvalidProductionTransitionError',
    'SaleNotFoundError',
    # Lookups
    'get_quote',
    'get_sale',
    'resolve_client',
    # Payment ledger
    'compute_payment_status',
    'add_payment',
    'remove_payment',
    'payment_summary',
    # Quote management
    'create_quote',
    'update_quote',
    'delete_quote',
    # Conversion
    'convert_quote_to_sale',
    # Production
    'validate_production_transition',
    'set_quote_production_status',
    'set_sale_production_status',
    'production_notification',
]
