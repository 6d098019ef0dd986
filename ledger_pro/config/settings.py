"""Settings resolved from the environment with sane defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from . import constants

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _get_env_str(env_name: str, default: str) -> str:
    raw = os.getenv(env_name)
    if raw is None:
        return default
    return raw


def _get_env_alias(env_names: tuple[str, ...], default: str) -> str:
    for env_name in env_names:
        raw = os.getenv(env_name)
        if raw is not None and raw != "":
            return raw
    return default


def _parse_env_float(env_name: str, default: float) -> float:
    raw = os.getenv(env_name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_log_level(env_name: str, default: str) -> str:
    raw = (os.getenv(env_name) or "").strip().upper()
    if raw in _LOG_LEVELS:
        return raw
    return default


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    request_timeout: float
    state_dir: str
    auth_username: str
    auth_password: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_base_url=_get_env_alias(
                ("LEDGER_PRO_API_BASE_URL",), constants.DEFAULT_API_BASE_URL
            ).rstrip("/"),
            request_timeout=_parse_env_float(
                "LEDGER_PRO_REQUEST_TIMEOUT", constants.DEFAULT_REQUEST_TIMEOUT
            ),
            state_dir=_get_env_alias(
                ("LEDGER_PRO_STATE_DIR", "LEDGER_PRO_STORAGE_DIR"),
                constants.DEFAULT_STATE_DIR,
            ),
            auth_username=_get_env_str(
                "LEDGER_PRO_USERNAME", constants.DEFAULT_AUTH_USERNAME
            ),
            auth_password=_get_env_str(
                "LEDGER_PRO_PASSWORD", constants.DEFAULT_AUTH_PASSWORD
            ),
            log_level=_parse_log_level(
                "LEDGER_PRO_LOG_LEVEL", constants.DEFAULT_LOG_LEVEL
            ),
        )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


__all__ = ["Settings", "get_settings"]
