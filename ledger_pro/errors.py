"""Error taxonomy surfaced to the user by the Ledger Pro client."""

from __future__ import annotations


class LedgerError(RuntimeError):
    """Base class for recoverable client failures.

    The message is what the dashboard shows, so keep it short and readable.
    """


class LoadError(LedgerError):
    """A list fetch (accounts or transactions) did not succeed."""


class CreateError(LedgerError):
    """A create request (account or transaction) did not succeed."""


class ValidationError(LedgerError):
    """A local precondition failed before any request was sent."""


class AuthError(LedgerError):
    """Submitted credentials did not match."""


__all__ = [
    "LedgerError",
    "LoadError",
    "CreateError",
    "ValidationError",
    "AuthError",
]
