"""Company-scoped record lookups shared by the quote services."""

from django.core.exceptions import ValidationError

from apps.clients.models import Client
from apps.quotes.models import Quote
from apps.sales.models import Sale

from .exceptions import QuoteNotFoundError, ClientNotFoundError, SaleNotFoundError


def get_quote(*, company, quote_id, for_update: bool = False) -> Quote:
    """
    Fetch a quote of ``company``.

    Raises:
        QuoteNotFoundError: If the quote doesn't exist, belongs to another
            company, or ``quote_id`` is not a valid id
    """
    queryset = Quote.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=quote_id, company=company)
    except (Quote.DoesNotExist, ValidationError, ValueError):
        raise QuoteNotFoundError(f"Quote {quote_id} not found")


def get_sale(*, company, sale_id, for_update: bool = False) -> Sale:
    queryset = Sale.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=sale_id, company=company)
    except (Sale.DoesNotExist, ValidationError, ValueError):
        raise SaleNotFoundError(f"Sale {sale_id} not found")


def resolve_client(*, company, client_id) -> Client:
    try:
        return Client.objects.get(id=client_id, company=company)
    except (Client.DoesNotExist, ValidationError, ValueError):
        raise ClientNotFoundError(f"Client {client_id} not found")
