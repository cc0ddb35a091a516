"""Quote management services."""

import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.catalog.services import price_line_items
from apps.quotes.models import Quote, QuoteItem, QuoteStatus

from .exceptions import QuoteAlreadyConvertedError, InvalidQuoteStatusError
from .lookup import get_quote, resolve_client
from .payment_ledger import compute_payment_status

logger = logging.getLogger(__name__)

# Statuses a user may pick by hand; the others follow payments and conversion
MANUAL_STATUSES = (QuoteStatus.PENDING, QuoteStatus.APPROVED, QuoteStatus.REJECTED)


def _replace_items(quote, items):
    quote.items.all().delete()
    QuoteItem.objects.bulk_create([
        QuoteItem(quote=quote, **values)
        for values in price_line_items(company=quote.company, items=items)
    ])
    quote.recalculate_total()


@transaction.atomic
def create_quote(
    *,
    company,
    items,
    client_id=None,
    client_name: str = '',
    client_phone: str = '',
    valid_days: int = None,
    delivery_date=None,
    notes: str = '',
) -> Quote:
    """
    Create a quote with its line items.

    The client snapshot (name, phone) is taken from the client record when
    ``client_id`` is given. ``valid_until`` is today plus ``valid_days``
    (``QUOTE_VALID_DAYS`` by default).

    Raises:
        ClientNotFoundError: If ``client_id`` is not a client of the company
        InvalidLineItemError / CatalogItemNotFoundError: From item pricing
    """
    client = None
    if client_id:
        client = resolve_client(company=company, client_id=client_id)
        client_name = client.name
        client_phone = client.phone

    if valid_days is None:
        valid_days = settings.QUOTE_VALID_DAYS

    quote = Quote.objects.create(
        company=company,
        client=client,
        client_name=client_name,
        client_phone=client_phone,
        valid_until=timezone.localdate() + timedelta(days=valid_days),
        delivery_date=delivery_date,
        notes=notes,
    )
    _replace_items(quote, items)
    quote.save(update_fields=['total', 'updated_at'])

    logger.info("Created quote %s for company %s (total %s)", quote.reference, company.id, quote.total)
    return quote


@transaction.atomic
def update_quote(*, company, quote_id, **changes) -> Quote:
    """
    Apply a validated partial update to a quote.

    Accepted keys: ``client_id``, ``items``, ``valid_days``,
    ``delivery_date``, ``notes``, ``status``. Replacing items recomputes
    the total and, with it, the payment status.

    Raises:
        QuoteNotFoundError: If the quote is not found
        QuoteAlreadyConvertedError: If the quote was converted into a sale
        InvalidQuoteStatusError: If ``status`` is not a manual status
    """
    quote = get_quote(company=company, quote_id=quote_id, for_update=True)

    if quote.is_converted:
        raise QuoteAlreadyConvertedError("A converted quote can no longer be changed")

    status = changes.get('status')
    if status is not None and status not in MANUAL_STATUSES:
        logger.warning("Rejected manual status %s on quote %s", status, quote.reference)
        raise InvalidQuoteStatusError(
            f"Status '{status}' is set by payments or conversion and cannot be chosen manually"
        )

    if changes.get('client_id'):
        client = resolve_client(company=company, client_id=changes['client_id'])
        quote.client = client
        quote.client_name = client.name
        quote.client_phone = client.phone

    if 'items' in changes:
        _replace_items(quote, changes['items'])

    if changes.get('valid_days') is not None:
        quote.valid_until = timezone.localdate(quote.created_at) + timedelta(days=changes['valid_days'])

    for field in ('delivery_date', 'notes'):
        if field in changes:
            setattr(quote, field, changes[field])

    quote.status = compute_payment_status(
        total=quote.total,
        paid=quote.get_amount_paid(),
        current=status or quote.status,
    )
    quote.save()
    return quote


@transaction.atomic
def delete_quote(*, company, quote_id) -> None:
    """Delete a quote. Sales converted from it keep their own copy."""
    quote = get_quote(company=company, quote_id=quote_id, for_update=True)
    reference = quote.reference
    quote.delete()
    logger.info("Deleted quote %s", reference)
