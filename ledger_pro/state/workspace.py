"""Client workspace wiring session, accounts and transactions together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from ..api.client import LedgerApiClient
from ..api.schemas import Account, Transaction
from ..config.settings import Settings
from ..errors import LedgerError, LoadError
from ..storage.state_store import (
    Identity,
    StateStore,
    load_client_state,
    save_identity,
    save_locks,
)
from .eligibility import can_transact
from .registry import AccountRegistry, AccountSource
from .session import AuthenticationProvider, FixedCredentialProvider, SessionGate
from .transactions import Totals, TransactionForm, TransactionSource, TransactionView

logger = logging.getLogger(__name__)


class LedgerBackend(AccountSource, TransactionSource, Protocol):
    pass


@dataclass
class LoginForm:
    username: str = ""
    password: str = ""


class Workspace:
    """Everything one signed-in user interacts with.

    Operations never raise ``LedgerError``: failures are logged and kept as
    the single message the UI shows (``error`` on the dashboard,
    ``login_error`` on the login screen). Identity and locks are written to
    the store after every change.
    """

    def __init__(
        self,
        backend: LedgerBackend,
        store: StateStore,
        *,
        provider: AuthenticationProvider | None = None,
    ) -> None:
        self._store = store
        state = load_client_state(store)
        self.registry = AccountRegistry(backend, locks=state.locks)
        self.view = TransactionView(backend)
        self.session = SessionGate(
            provider or FixedCredentialProvider(),
            identity=state.identity,
            on_authenticated=self._handle_authenticated,
            on_logout=self._handle_logout,
        )
        self.login_form = LoginForm()
        self.transaction_form = TransactionForm()
        self.account_name_input = ""
        self.error = ""
        self.login_error = ""
        self._started = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Workspace":
        backend = LedgerApiClient(
            base_url=settings.api_base_url, timeout=settings.request_timeout
        )
        provider = FixedCredentialProvider(
            settings.auth_username, settings.auth_password
        )
        return cls(backend, StateStore(settings.state_dir), provider=provider)

    def start(self) -> None:
        """Load accounts once if a persisted identity was restored."""
        if self._started:
            return
        self._started = True
        if self.session.is_authenticated:
            self.load_accounts()

    # derived views

    @property
    def identity(self) -> Identity | None:
        return self.session.identity

    @property
    def selection(self) -> str | None:
        return self.registry.selection

    @property
    def locks(self) -> dict[str, bool]:
        return self.registry.locks

    def ordered_accounts(self) -> list[Account]:
        return self.registry.ordered_accounts()

    def selected_account(self) -> Account | None:
        return self.registry.selected_account()

    def transactions(self) -> list[Transaction]:
        return self.view.transactions

    def totals(self) -> Totals:
        if self.selected_account() is None:
            return Totals(total_debit=0.0, total_credit=0.0, balance=0.0)
        return self.view.totals()

    def can_transact(self) -> bool:
        return can_transact(self.registry.selection, self.registry.locks)

    # session

    def login(self, username: str | None = None, password: str | None = None) -> bool:
        if username is not None:
            self.login_form.username = username
        if password is not None:
            self.login_form.password = password
        self.login_error = ""
        try:
            self.session.login(self.login_form.username, self.login_form.password)
        except LedgerError as exc:
            self.login_error = str(exc)
            return False
        save_identity(self._store, self.session.identity)
        return True

    def logout(self) -> None:
        self.session.logout()

    def _handle_authenticated(self, identity: Identity) -> None:
        save_identity(self._store, identity)
        self._started = True
        self.load_accounts()

    def _handle_logout(self) -> None:
        save_identity(self._store, None)
        self.registry.clear_selection()
        self.view.show(None)
        self.login_form = LoginForm()

    # accounts

    def load_accounts(self) -> bool:
        self.error = ""
        previous = self.registry.selection
        try:
            self.registry.load_accounts()
        except LedgerError as exc:
            self._surface(exc)
            return False
        self._sync_selection(previous)
        return True

    def create_account(self, name: str | None = None) -> Account | None:
        if name is not None:
            self.account_name_input = name
        previous = self.registry.selection
        try:
            account = self.registry.create_account(self.account_name_input)
        except LedgerError as exc:
            self._surface(exc)
            return None
        self.account_name_input = ""
        self._sync_selection(previous)
        return account

    def select(self, account_id: str | None) -> bool:
        """Select an account offered by the picker.

        Locked or unknown ids are refused, matching the picker which never
        offers them.
        """
        if account_id is not None and not self.registry.can_select(account_id):
            logger.warning("Refusing to select unavailable account %s", account_id)
            return False
        previous = self.registry.selection
        self.registry.select(account_id)
        self._sync_selection(previous)
        return True

    def toggle_lock(self, account_id: str) -> bool:
        previous = self.registry.selection
        locked = self.registry.toggle_lock(account_id)
        save_locks(self._store, self.registry.locks)
        self._sync_selection(previous)
        return locked

    # transactions

    def load_transactions(self) -> bool:
        selection = self.registry.selection
        if selection is None:
            self.view.show(None)
            return True
        self.error = ""
        try:
            return self.view.load_transactions(selection)
        except LedgerError as exc:
            self._surface(exc)
            return False

    def add_transaction(self, form: TransactionForm | None = None) -> Transaction | None:
        if form is not None:
            self.transaction_form = form
        try:
            created = self.view.add_transaction(
                self.transaction_form,
                selection=self.registry.selection,
                locks=self.registry.locks,
            )
        except LoadError as exc:
            # the create went through; only the refresh failed
            self.transaction_form = TransactionForm()
            self._surface(exc)
            return None
        except LedgerError as exc:
            self._surface(exc)
            return None
        self.transaction_form = TransactionForm()
        return created

    def _sync_selection(self, previous: str | None) -> None:
        if self.registry.selection != previous:
            self.load_transactions()

    def _surface(self, exc: LedgerError) -> None:
        logger.warning("%s: %s", type(exc).__name__, exc)
        self.error = str(exc)


__all__ = ["LedgerBackend", "LoginForm", "Workspace"]
