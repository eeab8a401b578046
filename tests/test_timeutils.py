# tests/test_timeutils.py
"""Unit tests for day bounds and timestamp formatting."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date, datetime, timedelta, timezone
from app.config import settings
from app.utils.timeutils import day_bounds, end_of_day, format_utc, start_of_day, to_naive_utc


class TestDayBounds:
    def test_utc_day_is_half_open(self, monkeypatch):
        monkeypatch.setattr(settings, "TIMEZONE", "UTC")
        start, end = day_bounds(date(2026, 3, 5))

        assert start == datetime(2026, 3, 5)
        assert end == datetime(2026, 3, 6)
        assert end == start_of_day(date(2026, 3, 6))

    def test_last_fraction_of_second_belongs_to_its_day(self, monkeypatch):
        monkeypatch.setattr(settings, "TIMEZONE", "UTC")
        late = datetime(2026, 3, 5, 23, 59, 59, 500000)

        assert start_of_day(date(2026, 3, 5)) <= late < end_of_day(date(2026, 3, 5))
        assert not (start_of_day(date(2026, 3, 6)) <= late)

    def test_local_day_converted_to_utc(self, monkeypatch):
        monkeypatch.setattr(settings, "TIMEZONE", "America/Sao_Paulo")
        day = date(2026, 3, 5)

        assert start_of_day(day) == datetime(2026, 3, 5, 3, 0)
        assert end_of_day(day) == datetime(2026, 3, 6, 3, 0)

        # 02:30Z on the 6th is still the evening of the 5th in São Paulo
        early_utc = datetime(2026, 3, 6, 2, 30)
        assert start_of_day(day) <= early_utc < end_of_day(day)
        assert early_utc < start_of_day(day + timedelta(days=1))


class TestFormatting:
    def test_format_utc_milliseconds(self):
        assert format_utc(datetime(2026, 3, 10, 8, 15, 0, 123456)) == "2026-03-10T08:15:00.123Z"
        assert format_utc(None) is None

    def test_aware_values_converted(self):
        aware = datetime(2026, 3, 10, 5, 15, tzinfo=timezone(timedelta(hours=-3)))

        assert to_naive_utc(aware) == datetime(2026, 3, 10, 8, 15)
        assert format_utc(aware) == "2026-03-10T08:15:00.000Z"
