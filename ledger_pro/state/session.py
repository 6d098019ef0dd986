"""Login gate in front of the account and transaction views."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol

from ..config import constants
from ..errors import AuthError, ValidationError
from ..storage.state_store import Identity

logger = logging.getLogger(__name__)


class AuthenticationProvider(Protocol):
    def verify(self, username: str, password: str) -> bool:
        ...


class FixedCredentialProvider:
    """Accepts exactly one username/password pair held in client config.

    This performs no hashing and talks to no server; it only stands in for a
    real backend-verified login.
    """

    def __init__(
        self,
        username: str = constants.DEFAULT_AUTH_USERNAME,
        password: str = constants.DEFAULT_AUTH_PASSWORD,
    ) -> None:
        self._username = username
        self._password = password

    def verify(self, username: str, password: str) -> bool:
        return username == self._username and password == self._password


class SessionStatus(Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class SessionGate:
    def __init__(
        self,
        provider: AuthenticationProvider,
        *,
        identity: Identity | None = None,
        on_authenticated: Callable[[Identity], None] | None = None,
        on_logout: Callable[[], None] | None = None,
    ) -> None:
        self._provider = provider
        self._identity = identity
        self._on_authenticated = on_authenticated
        self._on_logout = on_logout

    @property
    def identity(self) -> Identity | None:
        return self._identity

    @property
    def status(self) -> SessionStatus:
        if self._identity is None:
            return SessionStatus.ANONYMOUS
        return SessionStatus.AUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    def login(self, username: str, password: str) -> Identity:
        if not username.strip() or not password.strip():
            raise ValidationError("Please enter both username and password")
        if not self._provider.verify(username, password):
            logger.info("Rejected login for %r", username)
            raise AuthError("Invalid username or password")
        identity = Identity(username=username)
        was_authenticated = self.is_authenticated
        self._identity = identity
        logger.info("Signed in as %s", username)
        if not was_authenticated and self._on_authenticated is not None:
            self._on_authenticated(identity)
        return identity

    def logout(self) -> None:
        if self._identity is not None:
            logger.info("Signed out %s", self._identity.username)
        self._identity = None
        if self._on_logout is not None:
            self._on_logout()


__all__ = [
    "AuthenticationProvider",
    "FixedCredentialProvider",
    "SessionGate",
    "SessionStatus",
]
