"""Streamlit surface for the Ledger Pro client."""

from .formatting import display_text, format_date, format_money

__all__ = ["display_text", "format_date", "format_money"]
