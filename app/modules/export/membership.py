"""Time-bounded membership filtering."""

from datetime import datetime, timezone

from modules.export.domain.models import MemberEntry


def ensure_utc(value: datetime) -> datetime:
    """Return value as an aware datetime, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_active_member(
    entry: MemberEntry,
    membership_time: datetime,
    include_inactive: bool = False,
) -> bool:
    """Return True when entry counts as a member at membership_time.

    An entry is active when it is not flagged inactive, its period has not
    ended and its period has begun. include_inactive lifts the inactive flag
    and the end bound but never the start bound. Both bounds are exclusive
    and each missing bound places no constraint.
    """
    when = ensure_utc(membership_time)

    start = entry.period_start
    if start is not None and not ensure_utc(start) < when:
        return False

    if include_inactive:
        return True

    if entry.inactive:
        return False

    end = entry.period_end
    return end is None or ensure_utc(end) > when
