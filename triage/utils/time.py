from __future__ import annotations

from datetime import datetime, timezone

from dateutil.parser import isoparse


def now_utc_iso() -> str:
    """Return current time as a UTC ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def parse_date(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime string (e.g. an LMP or EDD).

    Raises ValueError when the string is not ISO formatted, which pydantic
    reports as a validation error.
    """
    return isoparse(value.strip())
