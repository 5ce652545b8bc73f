from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import MONTH_NAMES_ID
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: str) -> str:
    """Validate a YYYY-MM-DD string and return it unchanged (dates are keys, not datetimes)."""
    try:
        parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Tanggal tidak valid: {value!r}")
    return value


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it easier.
    """
    return datetime.now().date()


def iso_day(year: int, month: int, day: int) -> str:
    return f"{int(year):04d}-{int(month):02d}-{int(day):02d}"


def days_in_month(month: int, year: int) -> int:
    return calendar.monthrange(int(year), int(month))[1]


def month_name_id(month: int) -> str:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Bulan tidak valid: {month!r}")
    return MONTH_NAMES_ID[int(month) - 1]


def format_date_id(value: date) -> str:
    """Format like the id-ID locale short date (e.g. 17/10/2026)."""
    return f"{value.day}/{value.month}/{value.year}"
