"""
Line item pricing.

Turns validated item input into snapshot values for ``QuoteItem`` /
``SaleItem`` rows. Name, unit and price are copied from the catalog when a
product or service is referenced, so later catalog edits leave the line
untouched.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

from apps.catalog.models import Product, Service
from apps.core.models import MeasurementUnit
from apps.core.money import quantize_money, MAX_AMOUNT

from .exceptions import InvalidLineItemError, CatalogItemNotFoundError

QUANTITY_STEP = Decimal('0.001')


def _lookup(model, company, pk, label):
    try:
        return model.objects.get(id=pk, company=company)
    except (model.DoesNotExist, ValueError):
        raise CatalogItemNotFoundError(f"{label} {pk} not found")


def price_line_item(*, company, item: dict, position: int = 0) -> dict:
    """
    Resolve one line item.

    Args:
        company: Owner of the catalog the item may reference
        item: Validated input with optional ``product`` / ``service`` ids,
            ``name``, ``measurement_unit``, ``quantity``, ``width``,
            ``height`` and ``unit_price``
        position: Order of the line within its parent

    Returns:
        dict of model field values, ``total`` included

    Raises:
        CatalogItemNotFoundError: Referenced product/service is not in the catalog
        InvalidLineItemError: Missing name/price, bad dimensions or quantity
    """
    product_id = item.get('product')
    service_id = item.get('service')

    if product_id and service_id:
        raise InvalidLineItemError("An item references either a product or a service, not both")

    product = _lookup(Product, company, product_id, 'Product') if product_id else None
    service = _lookup(Service, company, service_id, 'Service') if service_id else None
    source = product or service

    name = item.get('name') or (source.name if source else '')
    if not name:
        raise InvalidLineItemError("Item name is required")

    unit_price = item.get('unit_price')
    if unit_price is None:
        if source is None:
            raise InvalidLineItemError(f"Unit price is required for '{name}'")
        unit_price = source.price
    if unit_price < 0:
        raise InvalidLineItemError(f"Unit price of '{name}' cannot be negative")

    if product is not None:
        unit = product.measurement_unit
    elif service is not None:
        unit = MeasurementUnit.UNIT
    else:
        unit = item.get('measurement_unit') or MeasurementUnit.UNIT

    width = item.get('width')
    height = item.get('height')

    if unit == MeasurementUnit.SQUARE_METER:
        if not width or not height or width <= 0 or height <= 0:
            raise InvalidLineItemError(f"Width and height are required for '{name}'")
        quantity = (Decimal(width) * Decimal(height)).quantize(QUANTITY_STEP, rounding=ROUND_HALF_UP)
    else:
        quantity = item.get('quantity')
        width = height = None
        if quantity is None or quantity <= 0:
            raise InvalidLineItemError(f"Quantity of '{name}' must be greater than zero")

    total = quantize_money(Decimal(quantity) * Decimal(unit_price))
    if total > MAX_AMOUNT:
        raise InvalidLineItemError(f"Total of '{name}' cannot exceed {MAX_AMOUNT}")

    return {
        'product': product,
        'service': service,
        'name': name,
        'measurement_unit': unit,
        'quantity': quantity,
        'width': width,
        'height': height,
        'unit_price': quantize_money(unit_price),
        'total': total,
        'position': position,
    }


def price_line_items(*, company, items) -> List[dict]:
    """
    Price every item in order. At least one item is required, and the
    items together must fit the parent's ``total`` column.
    """
    if not items:
        raise InvalidLineItemError("Add at least one item")
    priced = [
        price_line_item(company=company, item=item, position=index)
        for index, item in enumerate(items)
    ]
    if sum(line['total'] for line in priced) > MAX_AMOUNT:
        raise InvalidLineItemError(f"Order total cannot exceed {MAX_AMOUNT}")
    return priced


def copy_line_items(items) -> List[dict]:
    """Snapshot values of existing lines, for copying into a new parent."""
    return [
        {
            'product': line.product,
            'service': line.service,
            'name': line.name,
            'measurement_unit': line.measurement_unit,
            'quantity': line.quantity,
            'width': line.width,
            'height': line.height,
            'unit_price': line.unit_price,
            'total': line.total,
            'position': line.position,
        }
        for line in items
    ]
