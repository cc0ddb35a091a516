"""
Public order tracking.

Anyone holding a quote id may follow the order: the projection exposes
only what the client already knows (reference, name, items, dates and
production progress).
"""

import logging

from django.core.exceptions import ValidationError

from apps.core.models import ProductionStatus
from apps.quotes.models import Quote, QuoteStatus
from apps.sales.models import Sale

from .exceptions import OrderNotFoundError

logger = logging.getLogger(__name__)


def build_timeline(production_status: str) -> list:
    """
    One entry per production stage.

    Stages before the current one are ``completed``; the current stage is
    ``current`` (and completed once the order is delivered).
    """
    current_rank = ProductionStatus.rank(production_status)
    timeline = []
    for rank, (value, label) in enumerate(ProductionStatus.choices):
        is_current = rank == current_rank
        timeline.append({
            'status': value,
            'label': label,
            'completed': rank < current_rank or (
                is_current and value == ProductionStatus.DELIVERED
            ),
            'current': is_current,
        })
    return timeline


def get_order_tracking(*, quote_id) -> dict:
    """
    Tracking projection of a quote.

    Raises:
        OrderNotFoundError: If ``quote_id`` is malformed or unknown
    """
    try:
        quote = Quote.objects.prefetch_related('items').get(id=quote_id)
    except (Quote.DoesNotExist, ValidationError, ValueError):
        logger.info("Tracking lookup for unknown order %s", quote_id)
        raise OrderNotFoundError("Pedido não encontrado")

    return {
        'found': True,
        'id': quote.id,
        'reference': quote.reference,
        'client_name': quote.client_name,
        'created_at': quote.created_at,
        'total': quote.total,
        'delivery_date': quote.delivery_date,
        'production_status': quote.production_status,
        'production_status_label': ProductionStatus(quote.production_status).label,
        'items': [
            {
                'name': item.name,
                'quantity': item.quantity,
                'measurement_unit': item.measurement_unit,
                'total': item.total,
            }
            for item in quote.items.all()
        ],
        'timeline': build_timeline(quote.production_status),
    }


def list_production_activities(*, company) -> dict:
    """
    Work in progress for the production board.

    Quotes past ``waiting_approval`` that are not converted, plus every
    sale with a production status.
    """
    quotes = (
        Quote.objects
        .filter(company=company)
        .exclude(production_status=ProductionStatus.WAITING_APPROVAL)
        .exclude(status=QuoteStatus.CONVERTED)
    )
    sales = (
        Sale.objects
        .filter(company=company, production_status__isnull=False)
        .exclude(production_status='')
    )
    return {'quotes': list(quotes), 'sales': list(sales)}
