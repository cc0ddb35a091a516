"""Domain-specific exceptions for quotes services."""


class QuotesServiceError(Exception):
    """Base exception for quotes services."""
    pass


class QuoteNotFoundError(QuotesServiceError):
    """Raised when a quote doesn't exist or belongs to another company."""
    pass


class ClientNotFoundError(QuotesServiceError):
    """Raised when the referenced client is not a client of the company."""
    pass


class QuoteAlreadyConvertedError(QuotesServiceError):
    """Raised when a converted quote is modified or converted again."""
    pass


class InvalidQuoteStatusError(QuotesServiceError):
    """Raised when a status cannot be set manually."""
    pass


class InvalidPaymentAmountError(QuotesServiceError):
    """Raised when a payment amount is missing, malformed or not positive."""
    pass


class InvalidPaymentMethodError(QuotesServiceError):
    """Raised when the payment method is unknown."""
    pass


class PaymentNotFoundError(QuotesServiceError):
    """Raised when a payment doesn't belong to the quote."""
    pass


class InvalidProductionStatusError(QuotesServiceError):
    """Raised when the production status value is unknown."""
    pass


class InvalidProductionTransitionError(QuotesServiceError):
    """Raised when a production status would move backwards."""
    pass


class SaleNotFoundError(QuotesServiceError):
    """Raised when a sale doesn't exist or belongs to another company."""
    pass
