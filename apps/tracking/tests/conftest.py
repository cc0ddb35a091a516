import pytest
from decimal import Decimal
from apps.quotes.services import create_quote


@pytest.fixture
def tracked_quote(company):
    return create_quote(
        company=company,
        client_name='Ana Costa',
        client_phone='11 91234-5678',
        items=[
            {'name': 'Banner 1x2m', 'measurement_unit': 'm2', 'width': Decimal('1'),
             'height': Decimal('2'), 'unit_price': Decimal('40.00')},
            {'name': 'Cartão de visita (milheiro)', 'quantity': Decimal('1'), 'unit_price': Decimal('90.00')},
        ],
    )


@pytest.fixture
def other_quote_in_production(other_company):
    quote = create_quote(
        company=other_company,
        client_name='Cliente de outra gráfica',
        items=[{'name': 'Adesivo', 'quantity': Decimal('1'), 'unit_price': Decimal('10.00')}],
    )
    quote.production_status = 'in_production'
    quote.save(update_fields=['production_status'])
    return quote
