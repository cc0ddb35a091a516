"""Services for order tracking and client messaging."""

from .exceptions import TrackingServiceError, OrderNotFoundError, MissingPhoneError
from .messaging import (
    normalize_phone,
    build_whatsapp_link,
    tracking_url,
    compose_quote_message,
    compose_status_message,
    build_quote_share_link,
    build_status_notification,
)
from .order_tracking import build_timeline, get_order_tracking, list_production_activities

__all__ = [
    # Exceptions
    'TrackingServiceError',
    'OrderNotFoundError',
    'MissingPhoneError',
    # Messaging
    'normalize_phone',
    'build_whatsapp_link',
    'tracking_url',
    'compose_quote_message',
    'compose_status_message',
    'build_quote_share_link',
    'build_status_notification',
    # Tracking
    'build_timeline',
    'get_order_tracking',
    'list_production_activities',
]
