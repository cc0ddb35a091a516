from decimal import Decimal

from rest_framework import serializers

from apps.core.fields import CurrencyField
from apps.core.models import MeasurementUnit
from .models import Product, Service


class ProductSerializer(serializers.ModelSerializer):
    price = CurrencyField(max_digits=10, min_value=Decimal('0'))

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'description',
            'category',
            'price',
            'measurement_unit',
            'image',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class ServiceSerializer(serializers.ModelSerializer):
    price = CurrencyField(max_digits=10, min_value=Decimal('0'))

    class Meta:
        model = Service
        fields = [
            'id',
            'name',
            'description',
            'price',
            'duration',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class LineItemInputSerializer(serializers.Serializer):
    """
    One line of a quote or sale as submitted by the client.

    Reference a product or a service to take name, unit and price from
    the catalog, or give ``name`` and ``unit_price`` for a free line.
    ``m2`` lines need ``width`` and ``height``; quantity is their product.
    """

    product = serializers.UUIDField(required=False, allow_null=True)
    service = serializers.UUIDField(required=False, allow_null=True)
    name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    measurement_unit = serializers.ChoiceField(choices=MeasurementUnit.choices, required=False)
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3, required=False, allow_null=True)
    width = serializers.DecimalField(max_digits=8, decimal_places=3, required=False, allow_null=True)
    height = serializers.DecimalField(max_digits=8, decimal_places=3, required=False, allow_null=True)
    unit_price = CurrencyField(max_digits=10, required=False, allow_null=True)
