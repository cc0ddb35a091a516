"""
Serializers for analytics app.

Input Serializers:
    ReportQuerySerializer - Validates period and date range parameters

Response Serializers:
    ReportResponseSerializer - Sales and quote summaries with monthly charts
    DashboardResponseSerializer - Dashboard headline figures
"""

from calendar import monthrange
from datetime import date

from django.utils import timezone
from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class ReportQuerySerializer(serializers.Serializer):
    """
    Validate period and date range query parameters.

    Query Parameters:
        period (str): Month period in YYYY-MM format (e.g., '2026-10')
        start_date (date): Start of date range
        end_date (date): End of date range (inclusive)

    Note:
        If 'period' is provided, it takes precedence and is converted
        to start_date and end_date for the full month. Without any
        parameter the current month is reported.
    """

    period = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        allow_blank=True,
        help_text='Month period in YYYY-MM format'
    )
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        """Resolve period or defaults into a concrete date range."""
        period = attrs.get('period')

        if period:
            year, month = (int(part) for part in period.split('-'))
            attrs['start_date'] = date(year, month, 1)
            attrs['end_date'] = date(year, month, monthrange(year, month)[1])
        elif not attrs.get('start_date') and not attrs.get('end_date'):
            today = timezone.localdate()
            attrs['start_date'] = today.replace(day=1)
            attrs['end_date'] = today.replace(day=monthrange(today.year, today.month)[1])

        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if start and end and start > end:
            raise serializers.ValidationError({
                'start_date': 'Start date must be before end date'
            })

        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

class MonthlyBucketSerializer(serializers.Serializer):
    month = serializers.CharField(help_text='YYYY-MM')
    label = serializers.CharField()
    value = serializers.DecimalField(max_digits=14, decimal_places=2)


class MonthlyCountSerializer(serializers.Serializer):
    month = serializers.CharField(help_text='YYYY-MM')
    label = serializers.CharField()
    value = serializers.IntegerField()


class SalesSummarySerializer(serializers.Serializer):
    count = serializers.IntegerField()
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    paid_count = serializers.IntegerField()
    paid_total = serializers.DecimalField(max_digits=14, decimal_places=2)
    pending_count = serializers.IntegerField()
    pending_total = serializers.DecimalField(max_digits=14, decimal_places=2)


class QuoteSummarySerializer(serializers.Serializer):
    count = serializers.IntegerField()
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    pending_count = serializers.IntegerField()
    approved_count = serializers.IntegerField()
    converted_count = serializers.IntegerField()
    rejected_count = serializers.IntegerField()
    pending_total = serializers.DecimalField(max_digits=14, decimal_places=2)
    conversion_rate = serializers.CharField()


class ReportResponseSerializer(serializers.Serializer):
    start_date = serializers.DateField(allow_null=True)
    end_date = serializers.DateField(allow_null=True)
    sales = SalesSummarySerializer()
    quotes = QuoteSummarySerializer()
    monthly_sales = MonthlyBucketSerializer(many=True)
    monthly_quotes = MonthlyBucketSerializer(many=True)


class SalesThisMonthSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    total = serializers.DecimalField(max_digits=14, decimal_places=2)


class DashboardResponseSerializer(serializers.Serializer):
    client_count = serializers.IntegerField()
    pending_quote_count = serializers.IntegerField()
    sales_this_month = SalesThisMonthSerializer()
    monthly_sales = MonthlyBucketSerializer(many=True)
    monthly_new_clients = MonthlyCountSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    """Error response."""
    error = serializers.CharField()
