"""Configuration settings for the BLS client."""

import logging
import os
import string
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from bls_data.errors import InvalidKeyError


load_dotenv()

logger = logging.getLogger(__name__)


DEFAULT_API_URL = "https://api.bls.gov/publicAPI/v2/timeseries/data/"

# Envelope markers
RESPONSE_SUCCESS = "REQUEST_SUCCEEDED"
CATALOG_FAIL_PHRASES: tuple[str, ...] = (
    "unable to get catalog data",
    "catalog has been disabled",
)

# Service limits, indexed by API version (v1 = no key, v2 = registered key)
LIMIT_DAILY_QUERY: dict[int, int] = {1: 25, 2: 500}
LIMIT_YEARS_PER_QUERY: dict[int, int] = {1: 10, 2: 20}
LIMIT_SERIES_PER_QUERY: dict[int, int] = {1: 25, 2: 50}

# Documented failure statuses
STATUS_CODE_REASONS: dict[int, str] = {
    400: "Bad request. The request payload could not be understood.",
    401: "Unauthorized. The registration key is invalid or has expired.",
    404: "Not found. Check the API url.",
    429: "Too many requests. The daily request threshold has been reached.",
    500: "Internal server error on the BLS side. Try again later.",
}

KEY_LENGTH = 32
DEFAULT_KEY_FILE = Path.home() / ".blsdatakey"
REQUEST_TIMEOUT = 30.0


def read_key_file(path: Path | str) -> str | None:
    """
    Read a registration key from a file.

    Args:
        path: File holding the key on its first line

    Returns:
        The key, or None if the file does not exist

    Raises:
        InvalidKeyError: If the key is too short or not hexadecimal
    """
    path = Path(path).expanduser()
    if not path.is_file():
        return None

    key = path.read_text().strip()
    if len(key) > KEY_LENGTH:
        logger.warning(
            f"Key in {path} is longer than {KEY_LENGTH} characters, truncating"
        )
        key = key[:KEY_LENGTH]

    if any(c not in string.hexdigits for c in key):
        raise InvalidKeyError(f"Key in {path} contains non-hexadecimal characters")
    if len(key) < KEY_LENGTH:
        raise InvalidKeyError(
            f"Key in {path} has {len(key)} characters, expected {KEY_LENGTH}"
        )

    return key


@dataclass
class Settings:
    """Client settings, defaulting from the environment."""

    api_url: str = field(
        default_factory=lambda: os.getenv("BLS_API_URL", DEFAULT_API_URL)
    )
    api_key: str = field(default_factory=lambda: os.getenv("BLS_API_KEY", ""))
    key_file: Path = field(
        default_factory=lambda: Path(os.getenv("BLS_KEY_FILE", str(DEFAULT_KEY_FILE)))
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("BLS_TIMEOUT", REQUEST_TIMEOUT))
    )

    def resolve_key(self) -> str:
        """Explicit key first, then the key file, else no key."""
        if self.api_key:
            return self.api_key
        return read_key_file(self.key_file) or ""
