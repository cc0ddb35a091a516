"""
Quote payment ledger.

Payments are appended to a quote and the quote status follows the
cumulative amount paid:

    paid == 0            -> pending (or the manual status it had)
    0 < paid < total     -> partially_paid
    paid >= total        -> fully_paid

Every write locks the quote row with SELECT FOR UPDATE so concurrent
payments on the same quote are serialized.
"""

import logging
from decimal import Decimal

from django.db import transaction

from apps.core.models import PaymentMethod
from apps.core.money import parse_currency, InvalidAmountError, MAX_AMOUNT
from apps.quotes.models import Payment, QuoteStatus

from .exceptions import (
    QuoteAlreadyConvertedError,
    InvalidPaymentAmountError,
    InvalidPaymentMethodError,
    PaymentNotFoundError,
)
from .lookup import get_quote

logger = logging.getLogger(__name__)

PAYMENT_STATUSES = (QuoteStatus.PARTIALLY_PAID, QuoteStatus.FULLY_PAID)


def compute_payment_status(*, total: Decimal, paid: Decimal, current: str) -> str:
    """
    Derive the quote status from the amounts.

    Pure function; both ``add_payment`` and ``remove_payment`` rely on it.

    Args:
        total: Quote total
        paid: Sum of all payments
        current: Status before the change

    Returns:
        The new status. ``converted`` is final and returned unchanged.

    Example::

        >>> compute_payment_status(total=Decimal('150'), paid=Decimal('100'), current='pending')
        'partially_paid'
    """
    if current == QuoteStatus.CONVERTED:
        return QuoteStatus.CONVERTED
    if paid <= 0:
        # Nothing paid any more: fall back from a payment status
        return QuoteStatus.PENDING if current in PAYMENT_STATUSES else current
    if paid >= total:
        return QuoteStatus.FULLY_PAID
    return QuoteStatus.PARTIALLY_PAID


def _clean_amount(amount) -> Decimal:
    try:
        value = parse_currency(amount)
    except InvalidAmountError as e:
        raise InvalidPaymentAmountError(str(e))
    if value <= 0:
        raise InvalidPaymentAmountError("Payment amount must be greater than zero")
    if value > MAX_AMOUNT:
        raise InvalidPaymentAmountError(f"Payment amount cannot exceed {MAX_AMOUNT}")
    return value


@transaction.atomic
def add_payment(*, company, quote_id, amount, method: str) -> Payment:
    """
    Record a payment against a quote and update its status.

    Args:
        company: Caller's company
        quote_id: Quote being paid
        amount: Raw ("150.50") or pt-BR formatted ("R$ 1.234,56") amount
        method: One of ``PaymentMethod`` values

    Returns:
        The created Payment

    Raises:
        QuoteNotFoundError: If the quote is not found
        QuoteAlreadyConvertedError: If the quote was converted into a sale
        InvalidPaymentAmountError: If the amount is not a positive number
        InvalidPaymentMethodError: If the method is unknown
    """
    quote = get_quote(company=company, quote_id=quote_id, for_update=True)

    if quote.is_converted:
        raise QuoteAlreadyConvertedError("Payments cannot be added to a converted quote")

    try:
        value = _clean_amount(amount)
    except InvalidPaymentAmountError:
        logger.warning("Rejected payment amount %r on quote %s", amount, quote.reference)
        raise

    if method not in PaymentMethod.values:
        raise InvalidPaymentMethodError(f"Unknown payment method '{method}'")

    payment = Payment.objects.create(quote=quote, amount=value, method=method)

    paid = quote.get_amount_paid()
    quote.status = compute_payment_status(total=quote.total, paid=paid, current=quote.status)
    quote.save(update_fields=['status', 'updated_at'])

    logger.info(
        "Payment of %s (%s) added to quote %s: paid %s of %s, status %s",
        value, method, quote.reference, paid, quote.total, quote.status
    )
    return payment


@transaction.atomic
def remove_payment(*, company, quote_id, payment_id):
    """
    Delete a payment and recompute the quote status.

    The status may drop from ``fully_paid`` to ``partially_paid``, or back
    to ``pending`` when nothing remains paid.

    Returns:
        The updated Quote

    Raises:
        QuoteNotFoundError: If the quote is not found
        PaymentNotFoundError: If the payment is not part of the quote
        QuoteAlreadyConvertedError: If the quote was converted into a sale
    """
    quote = get_quote(company=company, quote_id=quote_id, for_update=True)

    if quote.is_converted:
        raise QuoteAlreadyConvertedError("Payments of a converted quote cannot be removed")

    deleted, _ = Payment.objects.filter(id=payment_id, quote=quote).delete()
    if not deleted:
        raise PaymentNotFoundError(f"Payment {payment_id} not found")

    paid = quote.get_amount_paid()
    quote.status = compute_payment_status(total=quote.total, paid=paid, current=quote.status)
    quote.save(update_fields=['status', 'updated_at'])

    logger.info("Payment %s removed from quote %s, status %s", payment_id, quote.reference, quote.status)
    return quote


def payment_summary(quote) -> dict:
    """
    Totals of a quote's payments.

    Returns:
        dict with ``total``, ``paid``, ``remaining`` (never negative),
        ``overpaid`` (amount paid beyond the total), ``payment_count``
        and ``status``
    """
    paid = quote.get_amount_paid()
    return {
        'total': quote.total,
        'paid': paid,
        'remaining': max(Decimal('0.00'), quote.total - paid),
        'overpaid': max(Decimal('0.00'), paid - quote.total),
        'payment_count': quote.payments.count(),
        'status': quote.status,
    }
