"""Time related assertion helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def assert_strict_utc(dt: datetime) -> None:
    """Fail unless *dt* is tz-aware and tagged with `timezone.utc` itself.

    A zero offset alone is not enough: a local zone that happens to sit at
    UTC+0 would pass that check on some machines only.
    """
    assert dt.tzinfo is not None, "timestamp must be tz-aware"
    assert dt.utcoffset() == timedelta(0), (
        f"expected UTC offset 0, got {dt.utcoffset()}"
    )
    assert dt.tzinfo is timezone.utc, f"tzinfo should be timezone.utc, got {dt.tzinfo!r}"
