"""Transaction list for the selected account and its derived totals."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Protocol

from ..api.schemas import Transaction, TransactionCreateRequest
from ..errors import LoadError, ValidationError
from .eligibility import can_transact

logger = logging.getLogger(__name__)


class TransactionSource(Protocol):
    def list_transactions(self, account_id: str) -> list[Transaction]:
        ...

    def create_transaction(self, request: TransactionCreateRequest) -> Transaction:
        ...


@dataclass(frozen=True)
class Totals:
    total_debit: float
    total_credit: float
    balance: float


@dataclass
class TransactionForm:
    """Raw text inputs of the new-transaction form."""

    date_of_entry: str = ""
    due_on: str = ""
    reference: str = ""
    description: str = ""
    debit: str = ""
    credit: str = ""
    remarks: str = ""

    def to_request(self, account_id: str) -> TransactionCreateRequest:
        if not self.date_of_entry.strip():
            raise ValidationError("Date of entry is required")
        return TransactionCreateRequest(
            account_id=account_id,
            date_of_entry=self.date_of_entry,
            due_on=self.due_on or None,
            reference=self.reference,
            description=self.description,
            debit=parse_amount(self.debit, "Debit"),
            credit=parse_amount(self.credit, "Credit"),
            remarks=self.remarks,
        )


def parse_amount(raw: str | float | int | None, label: str) -> float:
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = raw.strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError as exc:
            raise ValidationError(f"{label} must be a number") from exc
    if not math.isfinite(value):
        raise ValidationError(f"{label} must be a number")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    return value


def compute_totals(transactions: list[Transaction]) -> Totals:
    if not transactions:
        return Totals(total_debit=0.0, total_credit=0.0, balance=0.0)
    return Totals(
        total_debit=sum(tx.debit for tx in transactions),
        total_credit=sum(tx.credit for tx in transactions),
        # the server's running balance is authoritative
        balance=transactions[-1].balance,
    )


class TransactionView:
    """Cached transactions for one account at a time.

    ``target`` is the account the view currently shows. A fetch whose
    account no longer matches the target when it returns is dropped, so a
    slow response for a previous selection cannot overwrite the current one.
    """

    def __init__(self, source: TransactionSource) -> None:
        self._source = source
        self._transactions: list[Transaction] = []
        self._target: str | None = None

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    @property
    def target(self) -> str | None:
        return self._target

    def show(self, account_id: str | None) -> None:
        """Point the view at ``account_id``; ``None`` clears without a fetch."""
        self._target = account_id
        if account_id is None:
            self._transactions = []
            return
        self.load_transactions(account_id)

    def load_transactions(self, account_id: str) -> bool:
        """Fetch ``account_id``'s transactions; return False if discarded."""
        self._target = account_id
        try:
            transactions = self._source.list_transactions(account_id)
        except LoadError:
            if self._target != account_id:
                logger.debug("Ignoring failed fetch for stale account %s", account_id)
                return False
            raise
        if self._target != account_id:
            logger.debug(
                "Discarding transactions for %s; view now targets %s",
                account_id,
                self._target,
            )
            return False
        self._transactions = list(transactions)
        logger.debug("Loaded %s transactions for %s", len(transactions), account_id)
        return True

    def totals(self) -> Totals:
        return compute_totals(self._transactions)

    def add_transaction(
        self,
        form: TransactionForm,
        *,
        selection: str | None,
        locks: Mapping[str, bool],
    ) -> Transaction:
        if not can_transact(selection, locks):
            raise ValidationError("Select an unlocked account to add transactions")
        assert selection is not None
        request = form.to_request(selection)
        created = self._source.create_transaction(request)
        logger.info("Added transaction %s to account %s", created.id, selection)
        self.load_transactions(selection)
        return created


__all__ = [
    "Totals",
    "TransactionForm",
    "TransactionSource",
    "TransactionView",
    "compute_totals",
    "parse_amount",
]
