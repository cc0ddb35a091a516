from rest_framework import serializers

from apps.catalog.serializers import LineItemInputSerializer
from apps.core.models import PaymentMethod
from .models import Sale, SaleItem, SaleStatus


class SaleItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = SaleItem
        fields = [
            'id',
            'product',
            'service',
            'name',
            'measurement_unit',
            'quantity',
            'width',
            'height',
            'unit_price',
            'total',
        ]
        read_only_fields = fields


class SaleSerializer(serializers.ModelSerializer):
    reference = serializers.CharField(read_only=True)
    items = SaleItemSerializer(many=True, read_only=True)

    class Meta:
        model = Sale
        fields = [
            'id',
            'reference',
            'client',
            'client_name',
            'client_phone',
            'quote',
            'items',
            'total',
            'payment_method',
            'status',
            'production_status',
            'delivery_date',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SaleCreateSerializer(serializers.Serializer):
    """Input for a sale entered directly (not converted from a quote)."""

    client = serializers.UUIDField(required=False, allow_null=True)
    client_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    client_phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    items = LineItemInputSerializer(many=True, allow_empty=False)
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)
    status = serializers.ChoiceField(
        choices=[SaleStatus.PENDING, SaleStatus.PAID],
        required=False
    )
    delivery_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if not attrs.get('client') and not attrs.get('client_name', '').strip():
            raise serializers.ValidationError({
                'client': 'Select a client or give the client name'
            })
        return attrs


class SaleUpdateSerializer(serializers.Serializer):
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices, required=False)
    status = serializers.ChoiceField(choices=SaleStatus.choices, required=False)
    delivery_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)
