"""
Currency helpers for Brazilian real (BRL) amounts.

Amounts arrive from forms either raw (``150``, ``150.5``) or formatted the
pt-BR way (``1.234,56``, ``R$ 1.234,56``). Both are parsed into ``Decimal``
with cent precision.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENT = Decimal('0.01')

# Largest amount a 12-digit, 2-place money column holds
MAX_AMOUNT = Decimal('9999999999.99')

_THOUSANDS_ONLY = re.compile(r'^\d{1,3}(\.\d{3})+$')
_PLAIN_NUMBER = re.compile(r'-?[\d.,]+')


class InvalidAmountError(ValueError):
    """Raised when a value cannot be read as a currency amount."""
    pass


def quantize_money(value) -> Decimal:
    """Round to cents, half up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def parse_currency(value) -> Decimal:
    """
    Parse a raw or pt-BR formatted amount into a Decimal.

    Rules:
        - numbers (int, float, Decimal) are taken as-is
        - a comma is the decimal separator; dots before it are thousands
        - without a comma, ``1.234.567`` or ``1.234`` are thousands groups
        - otherwise a single dot is the decimal separator
        - only digits, dots, commas and a leading minus; no exponent

    Raises:
        InvalidAmountError: If the value is empty or not numeric.

    Example::

        >>> parse_currency('R$ 1.234,56')
        Decimal('1234.56')
        >>> parse_currency('150.5')
        Decimal('150.50')
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError('Amount is required')

    if isinstance(value, (int, float, Decimal)):
        try:
            amount = quantize_money(str(value))
        except InvalidOperation:
            raise InvalidAmountError(f'Invalid amount: {value!r}')
        if not amount.is_finite():
            raise InvalidAmountError(f'Invalid amount: {value!r}')
        return amount

    text = str(value).replace('R$', '').replace('\xa0', '').replace(' ', '').strip()
    if not text:
        raise InvalidAmountError('Amount is required')
    if not _PLAIN_NUMBER.fullmatch(text):
        raise InvalidAmountError(f'Invalid amount: {value!r}')

    if ',' in text:
        text = text.replace('.', '').replace(',', '.', 1)
    elif _THOUSANDS_ONLY.match(text):
        text = text.replace('.', '')

    try:
        return quantize_money(text)
    except InvalidOperation:
        raise InvalidAmountError(f'Invalid amount: {value!r}')


def format_currency(value) -> str:
    """
    Format an amount the pt-BR way.

    >>> format_currency(Decimal('1234.5'))
    'R$ 1.234,50'
    """
    amount = quantize_money(value)
    sign = '-' if amount < 0 else ''
    grouped = f'{abs(amount):,.2f}'  # 1,234.50
    grouped = grouped.replace(',', '_').replace('.', ',').replace('_', '.')
    return f'{sign}R$ {grouped}'
