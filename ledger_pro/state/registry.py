"""Cached account list, selection and lock map."""

from __future__ import annotations

import logging
import unicodedata
from typing import Mapping, Protocol

from ..api.schemas import Account
from ..errors import ValidationError

logger = logging.getLogger(__name__)


class AccountSource(Protocol):
    def list_accounts(self) -> list[Account]:
        ...

    def create_account(self, name: str) -> Account:
        ...


def collation_key(name: str) -> tuple[str, str, str]:
    """Sort key approximating locale-aware comparison.

    Accents and case are ignored first, then accented forms follow plain
    ones, then lowercase sorts before uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name.casefold(), name.swapcase())


class AccountRegistry:
    """Owns the fetched accounts and the "selected account" invariant.

    The selection, when set, must name a cached account that is not locked.
    ``load_accounts`` and ``toggle_lock`` restore that invariant; ``select``
    trusts its caller.
    """

    def __init__(
        self,
        source: AccountSource,
        *,
        locks: Mapping[str, bool] | None = None,
    ) -> None:
        self._source = source
        self._accounts: list[Account] = []
        self._locks: dict[str, bool] = {
            key: True for key, value in (locks or {}).items() if value
        }
        self._selection: str | None = None

    @property
    def accounts(self) -> list[Account]:
        """Accounts in fetch order."""
        return list(self._accounts)

    @property
    def locks(self) -> dict[str, bool]:
        return dict(self._locks)

    @property
    def selection(self) -> str | None:
        return self._selection

    def is_locked(self, account_id: str) -> bool:
        return self._locks.get(account_id, False)

    def selected_account(self) -> Account | None:
        if self._selection is None:
            return None
        for account in self._accounts:
            if account.id == self._selection:
                return account
        return None

    def ordered_accounts(self) -> list[Account]:
        return sorted(
            self._accounts,
            key=lambda account: (
                self.is_locked(account.id),
                collation_key(account.name),
            ),
        )

    def first_unlocked_id(self) -> str | None:
        for account in self._accounts:
            if not self.is_locked(account.id):
                return account.id
        return None

    def load_accounts(self) -> list[Account]:
        accounts = self._source.list_accounts()
        self._accounts = list(accounts)
        if self._selection is not None:
            known = {account.id for account in self._accounts}
            if self._selection not in known or self.is_locked(self._selection):
                logger.info("Clearing selection %s after reload", self._selection)
                self._selection = None
        logger.info("Loaded %s accounts", len(self._accounts))
        return self.accounts

    def create_account(self, name: str) -> Account:
        trimmed = name.strip()
        if not trimmed:
            raise ValidationError("Account name is required")
        account = self._source.create_account(trimmed)
        self._accounts.append(account)
        self._selection = account.id
        logger.info("Created account %s (%s)", account.id, account.name)
        return account

    def toggle_lock(self, account_id: str) -> bool:
        """Flip the lock on ``account_id`` and return the new locked state."""
        if self._locks.get(account_id):
            del self._locks[account_id]
            locked = False
        else:
            self._locks[account_id] = True
            locked = True
        if locked and self._selection == account_id:
            self._selection = self.first_unlocked_id()
            logger.info(
                "Selection moved from locked %s to %s", account_id, self._selection
            )
        return locked

    def select(self, account_id: str | None) -> None:
        self._selection = account_id

    def clear_selection(self) -> None:
        self._selection = None

    def can_select(self, account_id: str) -> bool:
        if self.is_locked(account_id):
            return False
        return any(account.id == account_id for account in self._accounts)


__all__ = ["AccountSource", "AccountRegistry", "collation_key"]
