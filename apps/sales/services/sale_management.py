"""Sale management services."""

import logging

from django.db import transaction

from apps.catalog.services import price_line_items
from apps.quotes.services.lookup import get_sale, resolve_client
from apps.sales.models import Sale, SaleItem, SaleStatus

from .exceptions import InvalidSaleStatusError

logger = logging.getLogger(__name__)


@transaction.atomic
def create_sale(
    *,
    company,
    items,
    payment_method: str,
    client_id=None,
    client_name: str = '',
    client_phone: str = '',
    status: str = SaleStatus.PENDING,
    delivery_date=None,
    notes: str = '',
) -> Sale:
    """
    Register a sale entered directly at the counter.

    Raises:
        ClientNotFoundError: If ``client_id`` is not a client of the company
        InvalidLineItemError / CatalogItemNotFoundError: From item pricing
    """
    client = None
    if client_id:
        client = resolve_client(company=company, client_id=client_id)
        client_name = client.name
        client_phone = client.phone

    sale = Sale.objects.create(
        company=company,
        client=client,
        client_name=client_name,
        client_phone=client_phone,
        payment_method=payment_method,
        status=status,
        delivery_date=delivery_date,
        notes=notes,
    )
    SaleItem.objects.bulk_create([
        SaleItem(sale=sale, **values)
        for values in price_line_items(company=company, items=items)
    ])
    sale.recalculate_total()
    sale.save(update_fields=['total', 'updated_at'])

    logger.info("Created sale %s for company %s (total %s)", sale.reference, company.id, sale.total)
    return sale


@transaction.atomic
def update_sale(*, company, sale_id, **changes) -> Sale:
    """
    Apply a validated partial update (payment method, status, delivery
    date, notes). A cancelled sale cannot be reopened.
    """
    sale = get_sale(company=company, sale_id=sale_id, for_update=True)

    new_status = changes.get('status')
    if (
        new_status
        and sale.status == SaleStatus.CANCELLED
        and new_status != SaleStatus.CANCELLED
    ):
        raise InvalidSaleStatusError("A cancelled sale cannot be reopened")

    for field in ('payment_method', 'status', 'delivery_date', 'notes'):
        if field in changes:
            setattr(sale, field, changes[field])
    sale.save()

    if new_status and new_status != SaleStatus.PENDING:
        logger.info("Sale %s marked %s", sale.reference, new_status)
    return sale


def mark_sale_paid(*, company, sale_id) -> Sale:
    """
    Raises:
        InvalidSaleStatusError: If the sale was cancelled
    """
    sale = get_sale(company=company, sale_id=sale_id)
    if sale.status == SaleStatus.CANCELLED:
        raise InvalidSaleStatusError("A cancelled sale cannot be marked as paid")
    return update_sale(company=company, sale_id=sale_id, status=SaleStatus.PAID)


@transaction.atomic
def delete_sale(*, company, sale_id) -> None:
    """Delete a sale. The quote it came from stays converted."""
    sale = get_sale(company=company, sale_id=sale_id, for_update=True)
    reference = sale.reference
    sale.delete()
    logger.info("Deleted sale %s", reference)
