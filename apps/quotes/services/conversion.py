"""Quote to sale conversion."""

import logging

from django.db import transaction

from apps.catalog.services import copy_line_items
from apps.core.models import PaymentMethod
from apps.quotes.models import QuoteStatus
from apps.sales.models import Sale, SaleItem, SaleStatus

from .exceptions import QuoteAlreadyConvertedError, InvalidPaymentMethodError
from .lookup import get_quote

logger = logging.getLogger(__name__)


@transaction.atomic
def convert_quote_to_sale(*, company, quote_id, payment_method: str) -> Sale:
    """
    Turn a quote into a sale.

    The sale receives a by-value copy of the quote items (new ids, same
    quantities and prices), the quote total, client snapshot, production
    status and delivery date. It is ``paid`` when the quote was fully
    paid, ``pending`` otherwise. The quote then becomes ``converted``.

    Sale creation and the quote status change commit together or not at all.

    Raises:
        QuoteNotFoundError: If the quote is not found
        QuoteAlreadyConvertedError: If the quote was already converted
        InvalidPaymentMethodError: If the payment method is unknown
    """
    quote = get_quote(company=company, quote_id=quote_id, for_update=True)

    if quote.is_converted:
        logger.warning("Rejected second conversion of quote %s", quote.reference)
        raise QuoteAlreadyConvertedError("Quote was already converted into a sale")

    if payment_method not in PaymentMethod.values:
        raise InvalidPaymentMethodError(f"Unknown payment method '{payment_method}'")

    sale = Sale.objects.create(
        company=company,
        client=quote.client,
        client_name=quote.client_name,
        client_phone=quote.client_phone,
        quote=quote,
        total=quote.total,
        payment_method=payment_method,
        status=SaleStatus.PAID if quote.status == QuoteStatus.FULLY_PAID else SaleStatus.PENDING,
        production_status=quote.production_status,
        delivery_date=quote.delivery_date,
        notes=quote.notes,
    )
    SaleItem.objects.bulk_create([
        SaleItem(sale=sale, **values)
        for values in copy_line_items(quote.items.all())
    ])

    quote.status = QuoteStatus.CONVERTED
    quote.save(update_fields=['status', 'updated_at'])

    logger.info("Quote %s converted into sale %s (total %s)", quote.reference, sale.reference, sale.total)
    return sale
