"""
Tests for analytics input serializers.
"""
from datetime import date
from apps.analytics.serializers import ReportQuerySerializer


class TestReportQuerySerializer:
    """Test ReportQuerySerializer validation."""

    def test_valid_period_format(self):
        serializer = ReportQuerySerializer(data={'period': '2026-02'})
        assert serializer.is_valid()
        assert serializer.validated_data['start_date'] == date(2026, 2, 1)
        assert serializer.validated_data['end_date'] == date(2026, 2, 28)

    def test_invalid_period_month(self):
        serializer = ReportQuerySerializer(data={'period': '2026-13'})
        assert not serializer.is_valid()
        assert 'period' in serializer.errors

    def test_defaults_to_current_month(self):
        serializer = ReportQuerySerializer(data={})
        assert serializer.is_valid()
        assert serializer.validated_data['start_date'].day == 1
        assert serializer.validated_data['end_date'].month == serializer.validated_data['start_date'].month

    def test_reversed_range(self):
        serializer = ReportQuerySerializer(data={
            'start_date': '2026-03-10',
            'end_date': '2026-03-01',
        })
        assert not serializer.is_valid()
        assert 'start_date' in serializer.errors

    def test_open_ended_range_kept(self):
        serializer = ReportQuerySerializer(data={'start_date': '2026-03-10'})
        assert serializer.is_valid()
        assert serializer.validated_data.get('end_date') is None
