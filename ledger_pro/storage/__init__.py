"""Local persistence for identity and account locks."""

from .state_store import (
    ClientState,
    Identity,
    StateStore,
    load_client_state,
    save_client_state,
    save_identity,
    save_locks,
)

__all__ = [
    "ClientState",
    "Identity",
    "StateStore",
    "load_client_state",
    "save_client_state",
    "save_identity",
    "save_locks",
]
