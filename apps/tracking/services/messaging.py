"""
Click-to-chat message links.

Composes the customer-facing WhatsApp messages (quote share and production
status updates) and wraps them in a ``https://wa.me/`` link. Messages are
written in Portuguese since they go straight to the shop's customers.
"""

import re
from typing import Optional
from urllib.parse import quote as urlquote

from django.conf import settings

from apps.core.models import ProductionStatus
from apps.core.money import format_currency

from .exceptions import MissingPhoneError

WHATSAPP_BASE_URL = 'https://wa.me/'

NOTIFY_STATUSES = (ProductionStatus.READY, ProductionStatus.DELIVERED)


def normalize_phone(phone: str, country_code: Optional[str] = None) -> str:
    """
    Keep digits only and prefix the country code for local numbers.

    >>> normalize_phone('(11) 98765-4321')
    '5511987654321'
    """
    country_code = country_code or settings.WHATSAPP_COUNTRY_CODE
    digits = re.sub(r'\D', '', phone or '')
    if not digits:
        return ''
    # Brazilian local numbers: 2-digit area code + 8 or 9 digits
    if len(digits) in (10, 11) or not digits.startswith(country_code):
        digits = f'{country_code}{digits}'
    return digits


def build_whatsapp_link(phone: str, message: str) -> str:
    digits = normalize_phone(phone)
    return f'{WHATSAPP_BASE_URL}{digits}?text={urlquote(message, safe="")}'


def tracking_url(quote_id) -> str:
    """Public tracking page for a quote."""
    base = settings.TRACKING_BASE_URL.rstrip('/')
    return f'{base}/acompanhar/{quote_id}/'


def _format_quantity(quantity) -> str:
    text = f'{quantity:f}'
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text.replace('.', ',')


def compose_quote_message(quote) -> str:
    """Message sharing a quote with its client."""
    lines = [
        f'Olá {quote.client_name}! 🖨️',
        '',
        f'Seu orçamento *#{quote.reference}* está pronto!',
        '',
        f'*Valor Total:* {format_currency(quote.total)}',
        '',
        '📋 *Itens:*',
    ]
    for item in quote.items.all():
        lines.append(
            f'• {item.name} ({_format_quantity(item.quantity)}x) - {format_currency(item.total)}'
        )
    lines += [
        '',
        '🔗 *Acompanhe seu pedido:*',
        tracking_url(quote.id),
        '',
        f'{settings.SHOP_NAME} - Qualidade em impressão!',
    ]
    return '\n'.join(lines)


def compose_status_message(*, client_name: str, reference: str, production_status: str,
                           quote_id=None) -> str:
    """Message telling the client the order is ready or delivered."""
    label = ProductionStatus(production_status).label
    message = (
        f'Olá {client_name}!\n\n'
        f'O status do seu pedido #{reference} foi atualizado para: {label}'
    )
    if quote_id:
        message += f'\n\nAcompanhe: {tracking_url(quote_id)}'
    return message


def build_quote_share_link(quote) -> dict:
    """
    Link that opens a chat with the quote's client, pre-filled with the quote.

    Raises:
        MissingPhoneError: If the quote has no client phone
    """
    if not normalize_phone(quote.client_phone):
        raise MissingPhoneError('Client has no phone number')
    message = compose_quote_message(quote)
    return {
        'url': build_whatsapp_link(quote.client_phone, message),
        'message': message,
        'tracking_url': tracking_url(quote.id),
    }


def build_status_notification(*, client_name: str, client_phone: str, reference: str,
                              production_status: str, quote_id=None) -> Optional[dict]:
    """
    Notification link for ``ready`` / ``delivered``.

    Returns None for other statuses or when there is no phone to message.
    """
    if production_status not in NOTIFY_STATUSES:
        return None
    if not normalize_phone(client_phone):
        return None
    message = compose_status_message(
        client_name=client_name,
        reference=reference,
        production_status=production_status,
        quote_id=quote_id,
    )
    return {
        'url': build_whatsapp_link(client_phone, message),
        'message': message,
    }
