from rest_framework import serializers

from apps.quotes.models import Quote
from apps.sales.models import Sale


class TimelineStepSerializer(serializers.Serializer):
    status = serializers.CharField()
    label = serializers.CharField()
    completed = serializers.BooleanField()
    current = serializers.BooleanField()


class TrackedItemSerializer(serializers.Serializer):
    name = serializers.CharField()
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3)
    measurement_unit = serializers.CharField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class OrderTrackingSerializer(serializers.Serializer):
    """Public projection of a quote."""

    found = serializers.BooleanField()
    id = serializers.UUIDField()
    reference = serializers.CharField()
    client_name = serializers.CharField()
    created_at = serializers.DateTimeField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    delivery_date = serializers.DateField(allow_null=True)
    production_status = serializers.CharField()
    production_status_label = serializers.CharField()
    items = TrackedItemSerializer(many=True)
    timeline = TimelineStepSerializer(many=True)


class OrderNotFoundSerializer(serializers.Serializer):
    found = serializers.BooleanField()
    error = serializers.CharField()


class ActivityQuoteSerializer(serializers.ModelSerializer):
    reference = serializers.CharField(read_only=True)
    kind = serializers.SerializerMethodField()

    class Meta:
        model = Quote
        fields = [
            'id', 'kind', 'reference', 'client_name', 'client_phone',
            'total', 'status', 'production_status', 'delivery_date', 'created_at',
        ]

    def get_kind(self, obj):
        return 'quote'


class ActivitySaleSerializer(serializers.ModelSerializer):
    reference = serializers.CharField(read_only=True)
    kind = serializers.SerializerMethodField()

    class Meta:
        model = Sale
        fields = [
            'id', 'kind', 'reference', 'client_name', 'client_phone', 'quote',
            'total', 'status', 'production_status', 'delivery_date', 'created_at',
        ]

    def get_kind(self, obj):
        return 'sale'


class ActivitiesSerializer(serializers.Serializer):
    quotes = ActivityQuoteSerializer(many=True)
    sales = ActivitySaleSerializer(many=True)
