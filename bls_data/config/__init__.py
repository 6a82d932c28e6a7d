"""Client configuration."""

from .settings import (
    CATALOG_FAIL_PHRASES,
    DEFAULT_API_URL,
    KEY_LENGTH,
    LIMIT_DAILY_QUERY,
    LIMIT_SERIES_PER_QUERY,
    LIMIT_YEARS_PER_QUERY,
    REQUEST_TIMEOUT,
    RESPONSE_SUCCESS,
    STATUS_CODE_REASONS,
    Settings,
    read_key_file,
)

__all__ = [
    "CATALOG_FAIL_PHRASES",
    "DEFAULT_API_URL",
    "KEY_LENGTH",
    "LIMIT_DAILY_QUERY",
    "LIMIT_SERIES_PER_QUERY",
    "LIMIT_YEARS_PER_QUERY",
    "REQUEST_TIMEOUT",
    "RESPONSE_SUCCESS",
    "STATUS_CODE_REASONS",
    "Settings",
    "read_key_file",
]
