"""Tests for month calendar helpers."""

from datetime import date, datetime

from fintrack.services.dates import as_date, days_in_month, expected_occurrence, month_window


class TestExpectedOccurrence:
    """Due dates clamp to the end of short months."""

    def test_regular_day(self):
        assert expected_occurrence(2024, 3, 5) == date(2024, 3, 5)

    def test_feb_non_leap(self):
        assert expected_occurrence(2023, 2, 31) == date(2023, 2, 28)

    def test_feb_leap(self):
        assert expected_occurrence(2024, 2, 31) == date(2024, 2, 29)

    def test_thirty_day_month(self):
        assert expected_occurrence(2024, 4, 31) == date(2024, 4, 30)

    def test_last_day_unchanged(self):
        assert expected_occurrence(2024, 1, 31) == date(2024, 1, 31)


def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2100, 2) == 28
    assert days_in_month(2024, 12) == 31


def test_month_window_padding():
    assert month_window(2024, 3, 10) == (date(2024, 2, 20), date(2024, 4, 10))


def test_month_window_year_boundaries():
    assert month_window(2024, 1, 10) == (date(2023, 12, 22), date(2024, 2, 10))
    assert month_window(2024, 12, 10) == (date(2024, 11, 21), date(2025, 1, 10))


def test_as_date():
    assert as_date(datetime(2024, 3, 5, 18, 30)) == date(2024, 3, 5)
    assert as_date(date(2024, 3, 5)) == date(2024, 3, 5)
