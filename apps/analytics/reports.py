"""
Reports Module
==============

Aggregations behind the reports page and the dashboard. Every function
works on in-memory collections of records (quotes, sales, clients), so the
figures are recomputed from scratch on every request; nothing is cached.

Records only need the attributes a calculation reads: ``created_at``,
``total`` and ``status``.

Classes:
    ReportCalculator: Static methods for summaries and monthly charts.

Example:
    Sales of the current month::

        from apps.analytics.reports import ReportCalculator

        sales = list(Sale.objects.filter(company=company))
        in_range = ReportCalculator.filter_by_date_range(sales, start, end)
        summary = ReportCalculator.sales_summary(in_range)
        print(summary['total'], summary['paid_total'])
"""

from datetime import date, datetime
from decimal import Decimal

from django.utils import timezone

from apps.quotes.models import QuoteStatus
from apps.sales.models import SaleStatus

from .exceptions import InvalidDateRangeError

MONTHS_IN_CHART = 6

# pt-BR month abbreviations for chart labels ("out/26")
MONTH_ABBREVIATIONS = [
    'jan', 'fev', 'mar', 'abr', 'mai', 'jun',
    'jul', 'ago', 'set', 'out', 'nov', 'dez',
]

ZERO = Decimal('0.00')


def _local_date(value):
    if not isinstance(value, datetime):
        return value
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.date()


def _shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _sum_totals(records):
    return sum((r.total for r in records), ZERO)


class ReportCalculator:
    """
    Pure report calculations.

    Methods:
        filter_by_date_range: Keep records created within [start, end].
        sales_summary: Count and totals of sales by payment status.
        quote_summary: Count and totals of quotes by status.
        conversion_rate: Converted share of quotes as a percentage string.
        monthly_buckets: Trailing six months of sums or counts.
        dashboard: Headline figures and charts for the home page.

    Note:
        All methods return plain dictionaries or lists, ready for the
        response serializers.
    """

    @staticmethod
    def filter_by_date_range(records, start=None, end=None):
        """
        Keep records whose ``created_at`` falls in [start, end].

        ``end`` is inclusive up to the end of that day. Either bound may be
        omitted.

        Raises:
            InvalidDateRangeError: If start is after end
        """
        if start and end and start > end:
            raise InvalidDateRangeError("Start date must be before end date")

        selected = []
        for record in records:
            created = _local_date(record.created_at)
            if start and created < start:
                continue
            if end and created > end:
                continue
            selected.append(record)
        return selected

    @staticmethod
    def sales_summary(sales):
        """
        Returns:
            dict: count, total, paid_count, paid_total, pending_count,
            pending_total
        """
        paid = [s for s in sales if s.status == SaleStatus.PAID]
        pending = [s for s in sales if s.status == SaleStatus.PENDING]
        return {
            'count': len(sales),
            'total': _sum_totals(sales),
            'paid_count': len(paid),
            'paid_total': _sum_totals(paid),
            'pending_count': len(pending),
            'pending_total': _sum_totals(pending),
        }

    @staticmethod
    def conversion_rate(converted_count, total_count):
        """
        Percentage of converted quotes with one decimal place.

        >>> ReportCalculator.conversion_rate(1, 4)
        '25.0'
        >>> ReportCalculator.conversion_rate(0, 0)
        '0'
        """
        if total_count <= 0:
            return '0'
        return f'{converted_count / total_count * 100:.1f}'

    @staticmethod
    def quote_summary(quotes):
        """
        Returns:
            dict: count, total, pending/approved/converted/rejected counts,
            pending_total and conversion_rate
        """
        by_status = {}
        for quote in quotes:
            by_status.setdefault(quote.status, []).append(quote)

        pending = by_status.get(QuoteStatus.PENDING, [])
        converted_count = len(by_status.get(QuoteStatus.CONVERTED, []))

        return {
            'count': len(quotes),
            'total': _sum_totals(quotes),
            'pending_count': len(pending),
            'approved_count': len(by_status.get(QuoteStatus.APPROVED, [])),
            'converted_count': converted_count,
            'rejected_count': len(by_status.get(QuoteStatus.REJECTED, [])),
            'pending_total': _sum_totals(pending),
            'conversion_rate': ReportCalculator.conversion_rate(converted_count, len(quotes)),
        }

    @staticmethod
    def monthly_buckets(records, *, today=None, months=MONTHS_IN_CHART, sum_totals=True):
        """
        Group records by creation month over the trailing ``months`` months.

        Always returns exactly ``months`` buckets ordered oldest to newest,
        the last one being the month of ``today``. Months without records
        have value 0.

        Args:
            records: Objects with ``created_at`` (and ``total`` when summing)
            today: Reference date, defaults to the local date
            months: Number of buckets
            sum_totals: Sum ``total`` when True, count records otherwise

        Returns:
            list[dict]: ``{'month': 'YYYY-MM', 'label': 'out/26', 'value': ...}``
        """
        today = today or timezone.localdate()
        keys = []
        for offset in range(months - 1, -1, -1):
            year, month = _shift_month(today.year, today.month, -offset)
            keys.append((year, month))

        values = {key: (ZERO if sum_totals else 0) for key in keys}
        for record in records:
            created = _local_date(record.created_at)
            key = (created.year, created.month)
            if key in values:
                values[key] += record.total if sum_totals else 1

        return [
            {
                'month': f'{year:04d}-{month:02d}',
                'label': f'{MONTH_ABBREVIATIONS[month - 1]}/{year % 100:02d}',
                'value': values[(year, month)],
            }
            for year, month in keys
        ]

    @staticmethod
    def dashboard(*, clients, quotes, sales, today=None):
        """
        Headline figures for the dashboard.

        Returns:
            dict: client_count, pending_quote_count, sales_this_month
            (count and total), monthly_sales and monthly_new_clients charts
        """
        today = today or timezone.localdate()
        month_start = today.replace(day=1)
        next_year, next_month = _shift_month(today.year, today.month, 1)
        month_end = date(next_year, next_month, 1)

        this_month = [
            s for s in sales
            if month_start <= _local_date(s.created_at) < month_end
        ]

        return {
            'client_count': len(clients),
            'pending_quote_count': sum(1 for q in quotes if q.status == QuoteStatus.PENDING),
            'sales_this_month': {
                'count': len(this_month),
                'total': _sum_totals(this_month),
            },
            'monthly_sales': ReportCalculator.monthly_buckets(sales, today=today),
            'monthly_new_clients': ReportCalculator.monthly_buckets(
                clients, today=today, sum_totals=False
            ),
        }
