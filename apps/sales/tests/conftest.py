import pytest
from decimal import Decimal
from apps.catalog.models import Product
from apps.clients.models import Client
from apps.quotes.services import create_quote, convert_quote_to_sale
from apps.sales.services import create_sale


@pytest.fixture
def sale_client(company):
    return Client.objects.create(
        company=company,
        name='João Pereira',
        phone='(21) 99876-5432',
    )


@pytest.fixture
def stickers(company):
    return Product.objects.create(
        company=company,
        name='Adesivo vinil (cento)',
        price=Decimal('25.00'),
    )


@pytest.fixture
def sale(company, sale_client, stickers):
    """Direct counter sale totalling 50.00."""
    return create_sale(
        company=company,
        client_id=sale_client.id,
        payment_method='cash',
        items=[{'product': stickers.id, 'quantity': Decimal('2')}],
    )


@pytest.fixture
def converted(company, sale_client, stickers):
    """(quote, sale) pair produced by converting a quote."""
    quote = create_quote(
        company=company,
        client_id=sale_client.id,
        items=[{'product': stickers.id, 'quantity': Decimal('4')}],
    )
    sale = convert_quote_to_sale(company=company, quote_id=quote.id, payment_method='pix')
    return quote, sale


@pytest.fixture
def other_sale(other_company):
    return create_sale(
        company=other_company,
        client_name='Cliente de outra gráfica',
        payment_method='cash',
        items=[{'name': 'Cartão', 'quantity': Decimal('1'), 'unit_price': Decimal('15.00')}],
    )
