"""Connection to the BLS API with daily request bookkeeping."""

import logging
from datetime import datetime
from typing import Callable

import httpx

from bls_data.config import DEFAULT_API_URL, REQUEST_TIMEOUT, Settings
from bls_data.errors import TransportFailure
from bls_data.models import ApiTier, TierLimits


logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


class BlsConnection:
    """
    A connection to the BLS API.

    A registration key raises the request limits and makes catalog
    metadata available. The request counter only covers calls made
    through this object, so it is a lower bound on the day's usage.
    Not safe for concurrent use.
    """

    def __init__(
        self,
        url: str = DEFAULT_API_URL,
        key: str = "",
        *,
        client: httpx.Client | None = None,
        clock: Callable[[], datetime] | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.url = url
        self.key = key
        self.timeout = timeout
        self.clock = clock or datetime.now
        self._client = client
        self._n_requests = 0
        self._t_created = self.clock()

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, **kwargs
    ) -> "BlsConnection":
        """Build a connection from environment/file based settings."""
        settings = settings or Settings()
        return cls(
            settings.api_url,
            settings.resolve_key(),
            timeout=settings.timeout,
            **kwargs,
        )

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "BlsConnection":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def api_tier(self) -> ApiTier:
        return ApiTier.V2 if self.key else ApiTier.V1

    def limits(self) -> TierLimits:
        return self.api_tier().limits

    def requests_made(self) -> int:
        """Requests made today through this connection."""
        self._reset_if_new_day()
        return self._n_requests

    def requests_remaining(self) -> int:
        return self.limits().daily_requests - self.requests_made()

    def record_request(self) -> None:
        """Count one request that reached the server."""
        self._reset_if_new_day()
        self._n_requests += 1

    def _reset_if_new_day(self) -> None:
        now = self.clock()
        if now.date() != self._t_created.date():
            logger.debug(f"New day {now.date()}, resetting request count")
            self._t_created = now
            self._n_requests = 0

    def post(self, payload: dict) -> httpx.Response:
        """
        Send one POST request. No retry.

        Raises:
            TransportFailure: If no response was received
        """
        try:
            return self.client.post(self.url, json=payload, headers=HEADERS)
        except httpx.TransportError as e:
            raise TransportFailure(f"Request to {self.url} failed: {e}") from e

    def __repr__(self) -> str:
        return (
            f"BlsConnection(url={self.url!r}, api_version={self.api_tier().value}, "
            f"requests_made={self._n_requests})"
        )
