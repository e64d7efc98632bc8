from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_br(value: datetime | None) -> str:
    """dd/mm/YYYY HH:MM, the way the dashboard shows submission times."""
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y %H:%M")


def parse_timestamp(value) -> datetime | None:
    """Accept datetime, ISO-8601 strings (with optional 'Z') or None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).replace(tzinfo=None)
