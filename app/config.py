"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from app.i18n import DEFAULT_LOCALE
from db.config import load_env_files

_DEFAULT_MAX_FILE_BYTES = 5 * 1024 * 1024


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def is_positive_int(raw_value: str) -> bool:
    """
    Return True when the text is a decimal integer greater than zero.
    """

    try:
        return int(raw_value.strip()) > 0
    except ValueError:
        return False


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_max_file_bytes() -> int:
    _load_env_once()
    raw_value = os.getenv("QUEST_IMPORT_MAX_FILE_BYTES")
    if raw_value is None or not is_positive_int(raw_value):
        return _DEFAULT_MAX_FILE_BYTES
    return int(raw_value)


@dataclass(frozen=True)
class QuestImportSettings:
    """
    Runtime settings for quest JSON imports.
    """

    locale: str = DEFAULT_LOCALE
    max_file_bytes: int = _DEFAULT_MAX_FILE_BYTES
    log_coercions: bool = False


@lru_cache(maxsize=1)
def get_quest_import_settings() -> QuestImportSettings:
    """
    Return cached quest import settings from environment variables.
    """

    return QuestImportSettings(
        locale=_get_str_env("QUEST_IMPORT_LOCALE", DEFAULT_LOCALE).lower(),
        max_file_bytes=_get_max_file_bytes(),
        log_coercions=_get_bool_env("QUEST_IMPORT_LOG_COERCIONS", False),
    )
