"""
Tests for the pure report calculations.
"""
import pytest
from datetime import date
from decimal import Decimal

from apps.analytics.exceptions import InvalidDateRangeError
from apps.analytics.reports import ReportCalculator

from .conftest import at


class TestFilterByDateRange:

    def test_end_date_is_inclusive_to_end_of_day(self, make_record):
        late = make_record(at(2026, 3, 31))
        early = make_record(at(2026, 3, 1))
        outside = make_record(at(2026, 4, 1))

        selected = ReportCalculator.filter_by_date_range(
            [late, early, outside], date(2026, 3, 1), date(2026, 3, 31)
        )

        assert selected == [late, early]

    def test_open_bounds(self, make_record):
        records = [make_record(at(2020, 1, 1)), make_record(at(2030, 1, 1))]

        assert ReportCalculator.filter_by_date_range(records) == records

    def test_reversed_range_rejected(self):
        with pytest.raises(InvalidDateRangeError):
            ReportCalculator.filter_by_date_range([], date(2026, 5, 1), date(2026, 4, 1))


class TestSummaries:

    def test_sales_summary(self, make_record):
        sales = [
            make_record(at(2026, 1, 1), '100.00', 'paid'),
            make_record(at(2026, 1, 2), '50.00', 'pending'),
            make_record(at(2026, 1, 3), '25.00', 'cancelled'),
        ]

        summary = ReportCalculator.sales_summary(sales)

        assert summary['count'] == 3
        assert summary['total'] == Decimal('175.00')
        assert summary['paid_count'] == 1
        assert summary['paid_total'] == Decimal('100.00')
        assert summary['pending_total'] == Decimal('50.00')

    def test_quote_summary_conversion_rate(self, make_record):
        quotes = [
            make_record(at(2026, 1, 1), '100', 'converted'),
            make_record(at(2026, 1, 1), '40', 'pending'),
            make_record(at(2026, 1, 1), '60', 'pending'),
            make_record(at(2026, 1, 1), '10', 'rejected'),
        ]

        summary = ReportCalculator.quote_summary(quotes)

        assert summary['conversion_rate'] == '25.0'
        assert summary['pending_count'] == 2
        assert summary['pending_total'] == Decimal('100')
        assert summary['rejected_count'] == 1

    def test_conversion_rate_without_quotes(self):
        assert ReportCalculator.conversion_rate(0, 0) == '0'
        assert ReportCalculator.quote_summary([])['conversion_rate'] == '0'

    def test_conversion_rate_one_decimal(self):
        assert ReportCalculator.conversion_rate(1, 3) == '33.3'


class TestMonthlyBuckets:

    def test_always_six_buckets_oldest_first(self):
        buckets = ReportCalculator.monthly_buckets([], today=date(2026, 10, 19))

        assert [b['month'] for b in buckets] == [
            '2026-05', '2026-06', '2026-07', '2026-08', '2026-09', '2026-10',
        ]
        assert all(b['value'] == Decimal('0.00') for b in buckets)

    def test_crosses_year_boundary(self):
        buckets = ReportCalculator.monthly_buckets([], today=date(2026, 2, 10))

        assert buckets[0]['month'] == '2025-09'
        assert buckets[0]['label'] == 'set/25'
        assert buckets[-1]['month'] == '2026-02'

    def test_sums_totals_by_month(self, make_record):
        records = [
            make_record(at(2026, 10, 1), '10.00'),
            make_record(at(2026, 10, 15), '5.50'),
            make_record(at(2026, 8, 3), '7.00'),
            make_record(at(2025, 1, 1), '999.00'),  # outside the window
        ]

        buckets = ReportCalculator.monthly_buckets(records, today=date(2026, 10, 19))
        values = {b['month']: b['value'] for b in buckets}

        assert values['2026-10'] == Decimal('15.50')
        assert values['2026-08'] == Decimal('7.00')
        assert values['2026-09'] == Decimal('0.00')
        assert sum(values.values()) == Decimal('22.50')

    def test_counts(self, make_record):
        records = [make_record(at(2026, 10, 1)), make_record(at(2026, 10, 2))]

        buckets = ReportCalculator.monthly_buckets(
            records, today=date(2026, 10, 19), sum_totals=False
        )

        assert buckets[-1]['value'] == 2
        assert buckets[0]['value'] == 0


class TestDashboard:

    def test_dashboard_figures(self, make_record):
        today = date(2026, 10, 19)
        clients = [make_record(at(2026, 10, 1)), make_record(at(2026, 6, 1))]
        quotes = [
            make_record(at(2026, 10, 1), '10', 'pending'),
            make_record(at(2026, 10, 1), '10', 'approved'),
        ]
        sales = [
            make_record(at(2026, 10, 5), '30.00', 'paid'),
            make_record(at(2026, 9, 30), '20.00', 'paid'),
        ]

        data = ReportCalculator.dashboard(clients=clients, quotes=quotes, sales=sales, today=today)

        assert data['client_count'] == 2
        assert data['pending_quote_count'] == 1
        assert data['sales_this_month'] == {'count': 1, 'total': Decimal('30.00')}
        assert len(data['monthly_sales']) == 6
        assert data['monthly_new_clients'][-1]['value'] == 1
