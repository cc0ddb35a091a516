"""Domain-specific exceptions for billing services."""


class BillingServiceError(Exception):
    """Base exception for billing services."""
    pass


class BillingDisabledError(BillingServiceError):
    """Raised when billing is switched off or not configured."""
    pass


class BillingProviderError(BillingServiceError):
    """Raised when the payment provider rejects or fails a request."""
    pass


class BillingAccountNotFoundError(BillingServiceError):
    """Raised when the user has no billing customer to manage."""
    pass
