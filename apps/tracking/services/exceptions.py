"""Domain-specific exceptions for tracking services."""


class TrackingServiceError(Exception):
    """Base exception for tracking services."""
    pass


class OrderNotFoundError(TrackingServiceError):
    """Raised when a tracking id does not resolve to a quote."""
    pass


class MissingPhoneError(TrackingServiceError):
    """Raised when a message link is requested for a record without phone."""
    pass
