"""Whether new transactions may be posted against the current selection."""

from __future__ import annotations

from typing import Mapping


def can_transact(selection: str | None, locks: Mapping[str, bool]) -> bool:
    if selection is None:
        return False
    return not locks.get(selection, False)


__all__ = ["can_transact"]
