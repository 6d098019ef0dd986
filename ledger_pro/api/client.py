"""HTTP client for the remote ledger backend."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import httpx
import pydantic

from ..config import constants
from ..errors import CreateError, LedgerError, LoadError
from .schemas import (
    Account,
    AccountCreateRequest,
    Transaction,
    TransactionCreateRequest,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class LedgerApiClient:
    """Thin wrapper over the four backend calls the client relies on.

    Every failure, whether a transport problem, a non-2xx status or a body
    that does not match the schema, is raised as the ``LedgerError``
    subclass the caller passes in, with the original exception chained.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = constants.DEFAULT_REQUEST_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = (base_url or constants.DEFAULT_API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    def __enter__(self) -> "LedgerApiClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def _ensure_http(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(
                base_url=self.base_url, timeout=self.timeout
            )
        return self._http_client

    def _request(
        self,
        method: str,
        path: str,
        *,
        error: type[LedgerError],
        message: str,
        **kwargs: Any,
    ) -> Any:
        logger.debug("ledger request %s %s", method, path)
        try:
            response = self._ensure_http().request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "ledger %s %s returned %s", method, path, exc.response.status_code
            )
            raise error(message) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("ledger %s %s failed: %s", method, path, exc)
            raise error(message) from exc

    def _parse(
        self,
        build: Callable[[], _T],
        *,
        error: type[LedgerError],
        message: str,
    ) -> _T:
        try:
            return build()
        except (pydantic.ValidationError, TypeError) as exc:
            logger.warning("ledger response rejected: %s", exc)
            raise error(message) from exc

    def list_accounts(self) -> list[Account]:
        message = "Failed to load accounts"
        payload = self._request(
            "GET", constants.ACCOUNTS_PATH, error=LoadError, message=message
        )
        return self._parse(
            lambda: [Account.model_validate(entry) for entry in payload],
            error=LoadError,
            message=message,
        )

    def list_transactions(self, account_id: str) -> list[Transaction]:
        message = "Failed to load transactions"
        payload = self._request(
            "GET",
            f"{constants.TRANSACTIONS_PATH}/{account_id}",
            error=LoadError,
            message=message,
        )
        return self._parse(
            lambda: [Transaction.model_validate(entry) for entry in payload],
            error=LoadError,
            message=message,
        )

    def create_account(self, name: str) -> Account:
        message = "Failed to create account"
        request = AccountCreateRequest(name=name)
        payload = self._request(
            "POST",
            constants.ACCOUNTS_PATH,
            json=request.model_dump(),
            error=CreateError,
            message=message,
        )
        return self._parse(
            lambda: Account.model_validate(payload),
            error=CreateError,
            message=message,
        )

    def create_transaction(self, request: TransactionCreateRequest) -> Transaction:
        message = "Failed to add transaction"
        payload = self._request(
            "POST",
            constants.TRANSACTIONS_PATH,
            json=request.to_wire(),
            error=CreateError,
            message=message,
        )
        return self._parse(
            lambda: Transaction.model_validate(payload),
            error=CreateError,
            message=message,
        )


__all__ = ["LedgerApiClient"]
