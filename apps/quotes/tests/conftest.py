import pytest
from decimal import Decimal
from apps.catalog.models import Product, Service
from apps.clients.models import Client
from apps.quotes.services import create_quote


@pytest.fixture
def quote_client(company):
    return Client.objects.create(
        company=company,
        name='Maria Silva',
        phone='(11) 98765-4321',
    )


@pytest.fixture
def banner(company):
    return Product.objects.create(
        company=company,
        name='Banner Lona',
        price=Decimal('45.00'),
        measurement_unit='m2',
    )


@pytest.fixture
def flyers(company):
    return Product.objects.create(
        company=company,
        name='Panfleto A5 (cento)',
        price=Decimal('30.00'),
    )


@pytest.fixture
def design(company):
    return Service.objects.create(
        company=company,
        name='Criação de arte',
        price=Decimal('60.00'),
    )


@pytest.fixture
def quote(company, quote_client, flyers, design):
    """Quote totalling 150.00: 3 x 30.00 flyers + 1 x 60.00 design."""
    return create_quote(
        company=company,
        client_id=quote_client.id,
        items=[
            {'product': flyers.id, 'quantity': Decimal('3')},
            {'service': design.id, 'quantity': Decimal('1')},
        ],
    )


@pytest.fixture
def other_quote(other_company):
    return create_quote(
        company=other_company,
        client_name='Cliente de outra gráfica',
        items=[{'name': 'Adesivo', 'quantity': Decimal('1'), 'unit_price': Decimal('10.00')}],
    )
