from decimal import Decimal

from rest_framework import serializers

from apps.catalog.serializers import LineItemInputSerializer
from apps.core.models import PaymentMethod, ProductionStatus
from .models import Quote, QuoteItem, Payment, QuoteStatus


class QuoteItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = QuoteItem
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


class PaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payment
        fields = ['id', 'amount', 'method', 'created_at']
        read_only_fields = fields


class QuoteSerializer(serializers.ModelSerializer):
    """Full quote representation with items, payments and balance."""

    reference = serializers.CharField(read_only=True)
    items = QuoteItemSerializer(many=True, read_only=True)
    payments = PaymentSerializer(many=True, read_only=True)
    amount_paid = serializers.SerializerMethodField()
    remaining = serializers.SerializerMethodField()

    class Meta:
        model = Quote
        fields = [
            'id',
            'reference',
            'client',
            'client_name',
            'client_phone',
            'items',
            'total',
            'payments',
            'amount_paid',
            'remaining',
            'status',
            'production_status',
            'valid_until',
            'delivery_date',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def _paid(self, obj):
        # Sum the prefetched payments instead of issuing one query per quote
        return sum((p.amount for p in obj.payments.all()), Decimal('0.00'))

    def get_amount_paid(self, obj):
        return str(self._paid(obj))

    def get_remaining(self, obj):
        return str(max(Decimal('0.00'), obj.total - self._paid(obj)))


class QuoteCreateSerializer(serializers.Serializer):
    """Input for creating a quote."""

    client = serializers.UUIDField(required=False, allow_null=True)
    client_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    client_phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    items = LineItemInputSerializer(many=True, allow_empty=False)
    valid_days = serializers.IntegerField(min_value=1, max_value=365, required=False)
    delivery_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if not attrs.get('client') and not attrs.get('client_name', '').strip():
            raise serializers.ValidationError({
                'client': 'Select a client or give the client name'
            })
        return attrs


class QuoteUpdateSerializer(serializers.Serializer):
    """Input for updating a quote; every field is optional on PATCH."""

    client = serializers.UUIDField(required=False)
    items = LineItemInputSerializer(many=True, allow_empty=False, required=False)
    valid_days = serializers.IntegerField(min_value=1, max_value=365, required=False)
    delivery_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=QuoteStatus.choices, required=False)


class PaymentCreateSerializer(serializers.Serializer):
    """Raw amount ("150.50", "R$ 1.234,56") is parsed by the ledger."""

    amount = serializers.CharField(max_length=30)
    method = serializers.ChoiceField(choices=PaymentMethod.choices)


class ConvertQuoteSerializer(serializers.Serializer):
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)


class ProductionStatusUpdateSerializer(serializers.Serializer):
    production_status = serializers.ChoiceField(choices=ProductionStatus.choices)


class NotificationLinkSerializer(serializers.Serializer):
    url = serializers.URLField()
    message = serializers.CharField()


class ProductionStatusResponseSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    production_status = serializers.CharField()
    notification = NotificationLinkSerializer(allow_null=True)


class PaymentSummarySerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    paid = serializers.DecimalField(max_digits=12, decimal_places=2)
    remaining = serializers.DecimalField(max_digits=12, decimal_places=2)
    overpaid = serializers.DecimalField(max_digits=12, decimal_places=2)
    payment_count = serializers.IntegerField()
    status = serializers.CharField()


class ShareLinkSerializer(serializers.Serializer):
    url = serializers.URLField()
    message = serializers.CharField()
    tracking_url = serializers.URLField()
