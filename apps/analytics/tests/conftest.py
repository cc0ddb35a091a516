import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from types import SimpleNamespace


def at(year, month, day):
    """Noon UTC, the same calendar day in the project time zone."""
    return datetime(year, month, day, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def make_record():
    """Build a lightweight record with the attributes reports read."""
    def _make(created_at, total='0', status='pending'):
        return SimpleNamespace(created_at=created_at, total=Decimal(total), status=status)
    return _make
