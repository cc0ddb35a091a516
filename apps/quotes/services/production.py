"""
Production status of quotes and sales.

Stages run waiting_approval -> approved -> in_production -> finishing ->
ready -> delivered. A quote and every sale converted from it share one
production status: writing either side copies the value to the others in
the same transaction.

Moves are free-form unless ``PRODUCTION_STATUS_FORWARD_ONLY`` is set.
"""

import logging

from django.conf import settings
from django.db import transaction

from apps.core.models import ProductionStatus
from apps.quotes.models import Quote
from apps.sales.models import Sale
from apps.tracking.services.messaging import build_status_notification

from .exceptions import InvalidProductionStatusError, InvalidProductionTransitionError
from .lookup import get_quote, get_sale

logger = logging.getLogger(__name__)


def validate_production_transition(current, new) -> None:
    """
    Raises:
        InvalidProductionStatusError: If ``new`` is not a production stage
        InvalidProductionTransitionError: On a backwards move while
            forward-only mode is enabled
    """
    if new not in ProductionStatus.values:
        raise InvalidProductionStatusError(f"Unknown production status '{new}'")

    if not settings.PRODUCTION_STATUS_FORWARD_ONLY or not current:
        return

    if ProductionStatus.rank(new) < ProductionStatus.rank(current):
        logger.warning("Rejected production status move %s -> %s", current, new)
        raise InvalidProductionTransitionError(
            f"Production status cannot move back from '{current}' to '{new}'"
        )


@transaction.atomic
def set_quote_production_status(*, company, quote_id, production_status: str) -> Quote:
    """Set a quote's production status and copy it to its sales."""
    quote = get_quote(company=company, quote_id=quote_id, for_update=True)
    validate_production_transition(quote.production_status, production_status)

    previous = quote.production_status
    quote.production_status = production_status
    quote.save(update_fields=['production_status', 'updated_at'])

    synced = Sale.objects.filter(quote=quote).update(production_status=production_status)

    logger.info(
        "Quote %s production status %s -> %s (%d linked sales updated)",
        quote.reference, previous, production_status, synced
    )
    return quote


@transaction.atomic
def set_sale_production_status(*, company, sale_id, production_status: str) -> Sale:
    """Set a sale's production status and copy it to its quote and sibling sales."""
    sale = get_sale(company=company, sale_id=sale_id, for_update=True)
    validate_production_transition(sale.production_status, production_status)

    previous = sale.production_status
    sale.production_status = production_status
    sale.save(update_fields=['production_status', 'updated_at'])

    if sale.quote_id:
        Quote.objects.filter(id=sale.quote_id).update(production_status=production_status)
        Sale.objects.filter(quote_id=sale.quote_id).exclude(id=sale.id).update(
            production_status=production_status
        )

    logger.info("Sale %s production status %s -> %s", sale.reference, previous, production_status)
    return sale


def production_notification(record):
    """
    Click-to-chat link announcing ``ready`` / ``delivered`` to the client.

    ``record`` is a Quote or a Sale. Returns None when no message applies.
    """
    if isinstance(record, Quote):
        quote_id = record.id
    else:
        quote_id = record.quote_id
    return build_status_notification(
        client_name=record.client_name,
        client_phone=record.client_phone,
        reference=record.reference,
        production_status=record.production_status,
        quote_id=quote_id,
    )
