"""File-backed persistence for client-local state."""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ..config import constants

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class StateStore:
    """JSON key-value store, one file per key."""

    def __init__(self, directory: str) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"invalid state key {key!r}")
        return self._dir / f"{key}.json"

    def read(self, key: str) -> Any | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        raw = path.read_text(encoding="utf-8").strip()
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable state file %s", path)
            return None

    def write(self, key: str, value: Any) -> None:
        path = self._path_for(key)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", delete=False, dir=str(self._dir)
        ) as tmp:
            json.dump(value, tmp)
            tmp.flush()
            os.fsync(tmp.fileno())
        temp_path = Path(tmp.name)
        try:
            os.replace(temp_path, path)
        finally:
            if temp_path.exists():
                temp_path.unlink()

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            path.unlink()

    def path(self, key: str) -> Path:
        return self._path_for(key)


@dataclass(frozen=True)
class Identity:
    username: str


@dataclass
class ClientState:
    """Durable client state restored at startup."""

    identity: Identity | None = None
    locks: dict[str, bool] = field(default_factory=dict)


def _parse_identity(raw: Any) -> Identity | None:
    if not isinstance(raw, Mapping):
        return None
    username = raw.get("username")
    if not isinstance(username, str) or not username.strip():
        return None
    return Identity(username=username)


def _parse_locks(raw: Any) -> dict[str, bool]:
    if not isinstance(raw, Mapping):
        return {}
    # unlocked accounts never keep a key
    return {str(key): True for key, value in raw.items() if value}


def load_client_state(store: StateStore) -> ClientState:
    return ClientState(
        identity=_parse_identity(store.read(constants.AUTH_STATE_KEY)),
        locks=_parse_locks(store.read(constants.LOCKED_ACCOUNTS_STATE_KEY)),
    )


def save_identity(store: StateStore, identity: Identity | None) -> None:
    if identity is None:
        store.delete(constants.AUTH_STATE_KEY)
        return
    store.write(constants.AUTH_STATE_KEY, {"username": identity.username})


def save_locks(store: StateStore, locks: Mapping[str, bool]) -> None:
    store.write(
        constants.LOCKED_ACCOUNTS_STATE_KEY,
        {key: True for key, value in locks.items() if value},
    )


def save_client_state(store: StateStore, state: ClientState) -> None:
    save_identity(store, state.identity)
    save_locks(store, state.locks)


__all__ = [
    "StateStore",
    "Identity",
    "ClientState",
    "load_client_state",
    "save_identity",
    "save_locks",
    "save_client_state",
]
