"""Helpers for resolving dates into calendar identifiers."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from periodic_notes.models import CalendarIdentifiers


def get_timezone(tz_name: str) -> ZoneInfo:
    """Return ZoneInfo instance with graceful fallback to UTC."""

    try:
        return ZoneInfo(tz_name)
    except Exception:
        return ZoneInfo("UTC")


def get_today(tz: ZoneInfo) -> date:
    """Return today's date in the provided timezone."""

    return datetime.now(tz).date()


def week_start(target: date) -> date:
    """Return the Monday that opens the ISO week containing ``target``."""

    return target - timedelta(days=target.isoweekday() - 1)


def resolve_calendar_ids(base: date | datetime, offset_days: int = 0) -> CalendarIdentifiers:
    """Shift ``base`` by ``offset_days`` and derive every identifier for that day.

    The week identifier uses the ISO week-year, so 2024-12-30 belongs to
    ``2025-W01``. The week start fields name the month the week note is filed
    under, which can precede the month of ``target``.
    """

    if isinstance(base, datetime):
        base = base.date()
    target = base + timedelta(days=offset_days)
    iso_year, iso_week, _ = target.isocalendar()
    monday = week_start(target)

    return CalendarIdentifiers(
        year=target.strftime("%Y"),
        year_month=target.strftime("%Y-%m"),
        year_month_day=target.strftime("%Y-%m-%d"),
        iso_year_week=f"{iso_year:04d}-W{iso_week:02d}",
        week_start_year=monday.strftime("%Y"),
        week_start_month=monday.strftime("%Y-%m"),
    )


__all__ = ["get_timezone", "get_today", "week_start", "resolve_calendar_ids"]
