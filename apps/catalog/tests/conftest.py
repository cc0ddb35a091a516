import pytest
from decimal import Decimal
from apps.catalog.models import Product, Service


@pytest.fixture
def banner(company):
    return Product.objects.create(
        company=company,
        name='Banner Lona',
        category='Comunicação visual',
        price=Decimal('45.00'),
        measurement_unit='m2',
    )


@pytest.fixture
def business_cards(company):
    return Product.objects.create(
        company=company,
        name='Cartão de visita (milheiro)',
        category='Impressos',
        price=Decimal('120.00'),
    )


@pytest.fixture
def design_service(company):
    return Service.objects.create(
        company=company,
        name='Criação de arte',
        price=Decimal('80.00'),
        duration='2 dias',
    )
