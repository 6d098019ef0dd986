"""Ledger Pro client package."""

from .config import constants, settings
from .errors import AuthError, CreateError, LedgerError, LoadError, ValidationError

__all__ = [
    "config",
    "constants",
    "settings",
    "AuthError",
    "CreateError",
    "LedgerError",
    "LoadError",
    "ValidationError",
]

__version__ = "0.1.0"
