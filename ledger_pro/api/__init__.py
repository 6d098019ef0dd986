"""Remote ledger backend access."""

from .client import LedgerApiClient
from .schemas import (
    Account,
    AccountCreateRequest,
    Transaction,
    TransactionCreateRequest,
)

__all__ = [
    "LedgerApiClient",
    "Account",
    "AccountCreateRequest",
    "Transaction",
    "TransactionCreateRequest",
]
