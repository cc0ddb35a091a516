from rest_framework import serializers

from .money import parse_currency, InvalidAmountError


class CurrencyField(serializers.DecimalField):
    """Decimal field that also accepts pt-BR formatted input ("1.234,56")."""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 12)
        kwargs.setdefault('decimal_places', 2)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        try:
            data = parse_currency(data)
        except InvalidAmountError as e:
            raise serializers.ValidationError(str(e))
        return super().to_internal_value(data)
