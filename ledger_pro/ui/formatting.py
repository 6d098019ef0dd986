"""Display helpers for ledger figures."""

from __future__ import annotations

from datetime import date, datetime

PLACEHOLDER = "—"


def format_money(value: float | int | str | None) -> str:
    try:
        amount = float(value or 0)
    except (TypeError, ValueError):
        amount = 0.0
    return f"{amount:,.2f}"


def _parse_date(value: str | date | datetime) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def format_date(value: str | date | datetime | None) -> str:
    if value is None:
        return PLACEHOLDER
    parsed = _parse_date(value)
    if parsed is None:
        return PLACEHOLDER
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def display_text(value: str | None) -> str:
    return value if value else PLACEHOLDER


__all__ = ["PLACEHOLDER", "display_text", "format_date", "format_money"]
