"""Tests for the membership-activity predicate."""

from datetime import datetime, timedelta, timezone

import pytest

from modules.export.domain.models import MemberEntry, Period
from modules.export.membership import ensure_utc, is_active_member

T = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
SECOND = timedelta(seconds=1)


def entry(inactive=None, start=None, end=None):
    period = Period(start=start, end=end) if (start or end) else None
    return MemberEntry(reference="Patient/p1", inactive=inactive, period=period)


class TestIsActiveMember:
    def test_entry_without_optional_fields_is_active(self):
        assert is_active_member(entry(), T) is True

    @pytest.mark.parametrize("inactive", [None, False])
    def test_not_inactive_is_active(self, inactive):
        assert is_active_member(entry(inactive=inactive), T) is True

    def test_inactive_is_excluded(self):
        assert is_active_member(entry(inactive=True), T) is False

    def test_include_inactive_overrides_flag(self):
        assert is_active_member(entry(inactive=True), T, include_inactive=True) is True

    def test_start_equal_to_time_is_excluded(self):
        assert is_active_member(entry(start=T), T) is False

    def test_start_before_time_is_included(self):
        assert is_active_member(entry(start=T - SECOND), T) is True

    def test_start_after_time_is_excluded(self):
        assert is_active_member(entry(start=T + SECOND), T) is False

    def test_end_equal_to_time_is_excluded(self):
        assert is_active_member(entry(end=T), T) is False

    def test_end_after_time_is_included(self):
        assert is_active_member(entry(end=T + SECOND), T) is True

    def test_end_one_second_later_query_includes(self):
        assert is_active_member(entry(end=T), T - SECOND) is True

    def test_inside_window_is_included(self):
        assert is_active_member(entry(start=T - SECOND, end=T + SECOND), T) is True

    def test_include_inactive_overrides_ended_period(self):
        assert is_active_member(entry(end=T - SECOND), T, include_inactive=True) is True

    def test_include_inactive_never_overrides_start(self):
        assert is_active_member(entry(start=T), T, include_inactive=True) is False
        assert (
            is_active_member(entry(inactive=True, start=T + SECOND), T, include_inactive=True)
            is False
        )

    def test_missing_start_with_end_only_constrains_end(self):
        assert is_active_member(entry(end=T + SECOND), T) is True
        assert is_active_member(entry(end=T - SECOND), T) is False

    def test_missing_end_with_start_only_constrains_start(self):
        assert is_active_member(entry(start=T - timedelta(days=365)), T) is True

    def test_naive_membership_time_read_as_utc(self):
        naive = datetime(2024, 6, 1, 12, 0, 0)
        assert is_active_member(entry(start=T), naive) is False
        assert is_active_member(entry(start=T - SECOND), naive) is True

    def test_offset_bounds_compared_as_instants(self):
        plus_two = timezone(timedelta(hours=2))
        # 14:00+02:00 is the same instant as 12:00Z
        start = datetime(2024, 6, 1, 14, 0, 0, tzinfo=plus_two)
        assert is_active_member(entry(start=start), T) is False


class TestEnsureUtc:
    def test_naive_gets_utc(self):
        assert ensure_utc(datetime(2024, 1, 1)).tzinfo == timezone.utc

    def test_aware_unchanged(self):
        aware = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        assert ensure_utc(aware) is aware
