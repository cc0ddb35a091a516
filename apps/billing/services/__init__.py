"""Services for billing."""

from .exceptions import (
    BillingServiceError,
    BillingDisabledError,
    BillingProviderError,
    BillingAccountNotFoundError,
)
from .checkout import start_checkout, open_billing_portal

__all__ = [
    # Exceptions
    'BillingServiceError',
    'BillingDisabledError',
    'BillingProviderError',
    'BillingAccountNotFoundError',
    # Services
    'start_checkout',
    'open_billing_portal',
]
