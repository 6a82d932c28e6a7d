"""Typed view of the BLS response envelope."""

from dataclasses import dataclass, field
from typing import Any

from bls_data.config import RESPONSE_SUCCESS
from bls_data.errors import ResponseShapeError
from bls_data.models import RawObservation
from bls_data.models.series import join_catalog


def _require(obj: dict, key: str, kind: type | tuple[type, ...], where: str) -> Any:
    if key not in obj:
        raise ResponseShapeError(f"{where}: missing {key!r}")
    value = obj[key]
    if not isinstance(value, kind):
        raise ResponseShapeError(
            f"{where}: {key!r} has unexpected type {type(value).__name__}"
        )
    return value


def _observation_from_json(obj: Any, where: str) -> RawObservation:
    if not isinstance(obj, dict):
        raise ResponseShapeError(f"{where}: observation is not an object")

    year = _require(obj, "year", (str, int), where)
    try:
        year = int(year)
    except ValueError as e:
        raise ResponseShapeError(f"{where}: year {year!r} is not an integer") from e

    period = _require(obj, "period", str, where)
    value = _require(obj, "value", (str, int, float), where)
    return RawObservation(year=year, period=period, value=str(value))


@dataclass
class SeriesFragment:
    """One entry of `Results.series`."""

    series_id: str
    observations: list[RawObservation]
    catalog: Any = None

    @classmethod
    def from_json(cls, obj: Any) -> "SeriesFragment":
        if not isinstance(obj, dict):
            raise ResponseShapeError("series entry is not an object")

        series_id = _require(obj, "seriesID", str, "series")
        where = f"series {series_id}"
        data = _require(obj, "data", list, where)
        observations = [_observation_from_json(o, where) for o in data]
        return cls(
            series_id=series_id,
            observations=observations,
            catalog=obj.get("catalog"),
        )

    def catalog_text(self) -> str:
        """
        Render the catalog as a single string.

        The service documents a string or list of strings; in practice it
        sends an object of named fields, whose values are joined in order.
        """
        catalog = self.catalog
        if catalog is None:
            return ""
        if isinstance(catalog, str):
            return catalog
        if isinstance(catalog, dict):
            catalog = list(catalog.values())
        if isinstance(catalog, list):
            return join_catalog(*(str(part) for part in catalog if part))
        raise ResponseShapeError(
            f"series {self.series_id}: catalog has unexpected type "
            f"{type(catalog).__name__}"
        )


@dataclass
class Envelope:
    """Top level of a response body."""

    status: str
    messages: list[str] = field(default_factory=list)
    series: list[SeriesFragment] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == RESPONSE_SUCCESS

    @classmethod
    def from_json(cls, payload: Any) -> "Envelope":
        """
        Validate a decoded response body.

        `Results.series` is only required when the request succeeded.

        Raises:
            ResponseShapeError: If required fields are absent or mistyped
        """
        if not isinstance(payload, dict):
            raise ResponseShapeError("response body is not a JSON object")

        status = _require(payload, "status", str, "envelope")

        messages = payload.get("message") or []
        if isinstance(messages, str):
            messages = [messages]
        if not isinstance(messages, list):
            raise ResponseShapeError("envelope: 'message' is not a list")
        messages = [str(m) for m in messages]

        envelope = cls(status=status, messages=messages)
        if not envelope.succeeded:
            return envelope

        results = _require(payload, "Results", dict, "envelope")
        entries = _require(results, "series", list, "Results")
        envelope.series = [SeriesFragment.from_json(e) for e in entries]
        return envelope
