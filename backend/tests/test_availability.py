"""Tests for the donation cooldown rule."""

from datetime import date, datetime, timedelta

from bloodlink.matching.availability import is_available_to_donate, next_eligible_date

NOW = datetime(2025, 9, 7, 22, 6)


class TestIsAvailableToDonate:
    def test_never_donated_is_available(self) -> None:
        assert is_available_to_donate(None, NOW)

    def test_95_days_ago_is_available(self) -> None:
        assert is_available_to_donate(NOW.date() - timedelta(days=95), NOW)

    def test_60_days_ago_is_not_available(self) -> None:
        assert not is_available_to_donate(NOW.date() - timedelta(days=60), NOW)

    def test_boundary_is_ninety_days(self) -> None:
        assert is_available_to_donate(NOW.date() - timedelta(days=90), NOW)
        assert not is_available_to_donate(NOW.date() - timedelta(days=89), NOW)

    def test_accepts_plain_date_for_now(self) -> None:
        assert not is_available_to_donate(date(2025, 8, 15), date(2025, 9, 7))

    def test_custom_cooldown(self) -> None:
        assert is_available_to_donate(date(2025, 8, 15), date(2025, 9, 7), cooldown_days=20)


class TestNextEligibleDate:
    def test_adds_cooldown(self) -> None:
        assert next_eligible_date(date(2025, 8, 15)) == date(2025, 11, 13)

    def test_none_when_never_donated(self) -> None:
        assert next_eligible_date(None) is None
