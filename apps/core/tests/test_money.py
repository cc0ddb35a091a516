import pytest
from decimal import Decimal

from apps.core.fields import CurrencyField
from apps.core.money import parse_currency, format_currency, InvalidAmountError
from rest_framework import serializers


class TestParseCurrency:

    @pytest.mark.parametrize('raw, expected', [
        ('150', '150.00'),
        ('150.5', '150.50'),
        ('150,50', '150.50'),
        ('1.234,56', '1234.56'),
        ('R$ 1.234,56', '1234.56'),
        ('R$\xa089,90', '89.90'),
        ('1.234.567', '1234567.00'),
        ('0.005', '0.01'),
        (42, '42.00'),
        (Decimal('19.999'), '20.00'),
    ])
    def test_parse(self, raw, expected):
        assert parse_currency(raw) == Decimal(expected)

    @pytest.mark.parametrize('raw', [
        '', '   ', 'R$', 'abc', 'NaN', 'Infinity', None, True,
        '1e2', '1E-3', '1e999999', '--5', '99999999999999999999999999999',
        float('nan'), Decimal('Infinity'),
    ])
    def test_invalid(self, raw):
        with pytest.raises(InvalidAmountError):
            parse_currency(raw)


class TestFormatCurrency:

    @pytest.mark.parametrize('value, expected', [
        (Decimal('0'), 'R$ 0,00'),
        (Decimal('150'), 'R$ 150,00'),
        (Decimal('1234.5'), 'R$ 1.234,50'),
        (Decimal('1234567.891'), 'R$ 1.234.567,89'),
        (Decimal('-10'), '-R$ 10,00'),
    ])
    def test_format(self, value, expected):
        assert format_currency(value) == expected


class TestCurrencyField:

    def test_accepts_pt_br_input(self):
        assert CurrencyField().run_validation('1.234,56') == Decimal('1234.56')

    def test_rejects_text(self):
        with pytest.raises(serializers.ValidationError):
            CurrencyField().run_validation('caro')

    def test_min_value(self):
        with pytest.raises(serializers.ValidationError):
            CurrencyField(min_value=Decimal('0')).run_validation('-1')
