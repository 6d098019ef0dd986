"""Client-side account, transaction and session state."""

from .eligibility import can_transact
from .registry import AccountRegistry, collation_key
from .session import (
    AuthenticationProvider,
    FixedCredentialProvider,
    SessionGate,
    SessionStatus,
)
from .transactions import Totals, TransactionForm, TransactionView, compute_totals
from .workspace import LoginForm, Workspace

__all__ = [
    "AccountRegistry",
    "AuthenticationProvider",
    "FixedCredentialProvider",
    "LoginForm",
    "SessionGate",
    "SessionStatus",
    "Totals",
    "TransactionForm",
    "TransactionView",
    "Workspace",
    "can_transact",
    "collation_key",
    "compute_totals",
]
