"""Data models for BLS series."""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

import pandas as pd

from bls_data.config import (
    LIMIT_DAILY_QUERY,
    LIMIT_SERIES_PER_QUERY,
    LIMIT_YEARS_PER_QUERY,
)
from bls_data.errors import ResponseShapeError


logger = logging.getLogger(__name__)

CATALOG_SEPARATOR = ". "


@dataclass(frozen=True)
class TierLimits:
    """Request limits in effect for an API version."""

    daily_requests: int
    years_per_request: int
    series_per_request: int


class ApiTier(Enum):
    """API version, determined by whether a registration key is set."""

    V1 = 1  # No key
    V2 = 2  # Registered key

    @property
    def limits(self) -> TierLimits:
        return TierLimits(
            daily_requests=LIMIT_DAILY_QUERY[self.value],
            years_per_request=LIMIT_YEARS_PER_QUERY[self.value],
            series_per_request=LIMIT_SERIES_PER_QUERY[self.value],
        )


@dataclass
class RawObservation:
    """Single observation as returned by the API."""

    year: int
    period: str
    value: str


def empty_frame() -> pd.DataFrame:
    """DataFrame with the series columns and no rows."""
    return pd.DataFrame(
        {
            "date": pd.Series(dtype="datetime64[ns]"),
            "value": pd.Series(dtype="float64"),
        }
    )


def join_catalog(*parts: str) -> str:
    return CATALOG_SEPARATOR.join(p for p in parts if p)


@dataclass(eq=False)
class BlsSeries:
    """A time series with its catalog text, as returned by `get_data`."""

    series_id: str = ""
    data: pd.DataFrame = field(default_factory=empty_frame)
    catalog: str = ""

    @classmethod
    def empty(cls) -> "BlsSeries":
        """Sentinel standing in for a series whose request failed."""
        return cls()

    @classmethod
    def from_rows(
        cls, series_id: str, rows: list[tuple[date, float]], catalog: str = ""
    ) -> "BlsSeries":
        """
        Build a series from parsed observations.

        Args:
            series_id: BLS series ID
            rows: (date, value) pairs, newest first as the API sends them
            catalog: Catalog text, possibly empty

        Returns:
            Series with rows in ascending date order
        """
        if not rows:
            return cls(series_id=series_id, catalog=catalog)

        df = pd.DataFrame(list(reversed(rows)), columns=["date", "value"])
        df["date"] = pd.to_datetime(df["date"])
        df["value"] = df["value"].astype("float64")
        # Service order is not guaranteed; ties keep arrival order
        df = df.sort_values("date", kind="stable").reset_index(drop=True)
        return cls(series_id=series_id, data=df, catalog=catalog)

    @property
    def is_empty(self) -> bool:
        return not self.series_id

    def append(self, other: "BlsSeries") -> None:
        """
        Append rows and catalog text from a later sub-request.

        Sentinels are skipped. An empty accumulator adopts `other`.

        Raises:
            ResponseShapeError: If the series IDs differ
        """
        if other.is_empty:
            logger.warning("Empty response from server ignored")
            return

        if self.is_empty:
            self.series_id = other.series_id
            self.data = other.data.copy()
            self.catalog = other.catalog
            return

        if other.series_id != self.series_id:
            raise ResponseShapeError(
                f"Cannot merge series {other.series_id!r} into {self.series_id!r}"
            )

        self.data = pd.concat([self.data, other.data], ignore_index=True)
        if other.catalog:
            self.catalog = join_catalog(self.catalog, other.catalog)
