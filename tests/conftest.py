"""Shared test fixtures for the BLS client."""

import json
from datetime import datetime, timedelta
from typing import Callable

import httpx
import pytest

from bls_data import BlsConnection


KEY = "0123456789abcdef0123456789abcdef"


class FakeClock:
    """Callable clock that tests can move forward."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def monthly_data(startyear: int, endyear: int) -> list[dict]:
    """Monthly observations newest first, valued YYYY.MM."""
    return [
        {"year": str(year), "period": f"M{month:02d}", "value": f"{year}.{month:02d}"}
        for year in range(endyear, startyear - 1, -1)
        for month in range(12, 0, -1)
    ]


def success_body(payload: dict, catalog: object = None, messages: list | None = None) -> dict:
    series = []
    for series_id in payload["seriesid"]:
        entry = {
            "seriesID": series_id,
            "data": monthly_data(int(payload["startyear"]), int(payload["endyear"])),
        }
        if catalog is not None:
            entry["catalog"] = catalog
        series.append(entry)
    return {
        "status": "REQUEST_SUCCEEDED",
        "responseTime": 42,
        "message": messages or [],
        "Results": {"series": series},
    }


class FakeBls:
    """MockTransport handler recording every request payload."""

    def __init__(self, respond: Callable[[dict], httpx.Response] | None = None) -> None:
        self.respond = respond or (lambda payload: httpx.Response(200, json=success_body(payload)))
        self.requests: list[dict] = []
        self.headers: list[httpx.Headers] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append(payload)
        self.headers.append(request.headers)
        return self.respond(payload)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 15, 12, 0))


@pytest.fixture
def server() -> FakeBls:
    return FakeBls()


@pytest.fixture
def connect(clock: FakeClock, server: FakeBls):
    """Build connections wired to the fake server."""
    connections = []

    def _connect(key: str = "", handler: Callable | None = None) -> BlsConnection:
        client = httpx.Client(transport=httpx.MockTransport(handler or server))
        connection = BlsConnection(
            "https://api.example.test/timeseries/data/",
            key,
            client=client,
            clock=clock,
        )
        connections.append(connection)
        return connection

    yield _connect

    for connection in connections:
        connection.close()
