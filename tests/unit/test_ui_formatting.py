from datetime import date

import pytest

from ledger_pro.ui.formatting import PLACEHOLDER, display_text, format_date, format_money


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "0.00"),
        (0, "0.00"),
        (1234.5, "1,234.50"),
        ("12", "12.00"),
        ("bad", "0.00"),
    ],
)
def test_format_money(value, expected) -> None:
    assert format_money(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-05", "Jan 5, 2024"),
        ("2024-01-05T00:00:00.000Z", "Jan 5, 2024"),
        (date(2023, 12, 31), "Dec 31, 2023"),
        ("", PLACEHOLDER),
        (None, PLACEHOLDER),
        ("not a date", PLACEHOLDER),
    ],
)
def test_format_date(value, expected) -> None:
    assert format_date(value) == expected


def test_display_text() -> None:
    assert display_text("") == PLACEHOLDER
    assert display_text(None) == PLACEHOLDER
    assert display_text("INV-1") == "INV-1"
