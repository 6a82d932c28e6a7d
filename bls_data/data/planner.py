"""Split a query into API-sized requests and stitch the results together."""

import logging
import warnings
from dataclasses import dataclass

from bls_data.data.connection import BlsConnection
from bls_data.data.fetcher import fetch_batch
from bls_data.errors import InsufficientQuota, InvalidDateRange
from bls_data.models import BlsSeries, TierLimits


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubRequest:
    """One HTTP request covering a year window for a chunk of series."""

    series: tuple[str, ...]
    startyear: int
    endyear: int
    offset: int = 0  # Position of series[0] in the caller's list


def resolve_years(
    startyear: int | None,
    endyear: int | None,
    limit: int,
    current_year: int,
) -> tuple[int, int]:
    """
    Fill in missing bounds so the range spans one request window.

    Raises:
        InvalidDateRange: If the range is empty or starts in the future
    """
    if startyear is None and endyear is None:
        endyear = current_year
        startyear = endyear - (limit - 1)
    elif startyear is None:
        startyear = endyear - (limit - 1)
    elif endyear is None:
        endyear = startyear + (limit - 1)

    if endyear <= startyear:
        raise InvalidDateRange(startyear, endyear, "end year must be after start year")
    if startyear > current_year:
        raise InvalidDateRange(startyear, endyear, f"start year is after {current_year}")
    return startyear, endyear


def plan_requests(
    series: list[str], startyear: int, endyear: int, limits: TierLimits
) -> list[SubRequest]:
    """
    Cover [startyear, endyear] x series with requests inside the tier limits.

    Windows are ordered chronologically; within a window, series chunks
    follow the caller's order.
    """
    years = limits.years_per_request
    size = limits.series_per_request
    n_windows = (endyear - startyear) // years + 1

    plan = []
    for i in range(n_windows):
        t0 = startyear + years * i
        t1 = min(t0 + years - 1, endyear)
        for offset in range(0, len(series), size):
            plan.append(SubRequest(tuple(series[offset:offset + size]), t0, t1, offset))
    return plan


def merge_results(
    accumulator: list[BlsSeries], result: list[BlsSeries], offset: int = 0
) -> None:
    """
    Append one request's series to the accumulated series in place.

    Sentinels in `result` are skipped; sentinels in `accumulator` are
    replaced by the first real series for that position.
    """
    for i, series in enumerate(result):
        accumulator[offset + i].append(series)


def get_data(
    connection: BlsConnection,
    series: str | list[str],
    startyear: int | None = None,
    endyear: int | None = None,
    catalog: bool = False,
    current_year: int | None = None,
) -> BlsSeries | list[BlsSeries]:
    """
    Request one or more series, splitting the query as the API requires.

    Args:
        connection: BLS connection
        series: A series ID or list of series IDs
        startyear: First year, inclusive. Defaults to one request window
            before `endyear`
        endyear: Last year, inclusive. Defaults to one request window after
            `startyear`, or to the current year if neither is given
        catalog: Whether to return catalog metadata
        current_year: Overrides the connection clock's year

    Returns:
        A BlsSeries if one series was requested, else a list in request
        order. Series whose requests all failed are empty sentinels.

    Raises:
        InvalidDateRange: If the resolved range is invalid
        ValueError: If no series are requested
    """
    ids = [series] if isinstance(series, str) else list(series)
    if not ids:
        raise ValueError("At least one series ID is required")

    limits = connection.limits()
    if current_year is None:
        current_year = connection.clock().year
    startyear, endyear = resolve_years(
        startyear, endyear, limits.years_per_request, current_year
    )

    plan = plan_requests(ids, startyear, endyear, limits)
    remaining = connection.requests_remaining()
    if len(plan) > remaining:
        message = (
            f"Insufficient number of requests remaining "
            f"({len(plan)} needed, {remaining} remaining)"
        )
        logger.warning(message)
        warnings.warn(message, InsufficientQuota, stacklevel=2)
        return _shape([BlsSeries.empty() for _ in ids])

    logger.info(
        f"Fetching {len(ids)} series for {startyear}-{endyear} "
        f"in {len(plan)} request(s)..."
    )
    accumulator = [BlsSeries.empty() for _ in ids]
    for sub in plan:
        result = fetch_batch(
            connection, list(sub.series), sub.startyear, sub.endyear, catalog
        )
        merge_results(accumulator, result, sub.offset)

    return _shape(accumulator)


def _shape(results: list[BlsSeries]) -> BlsSeries | list[BlsSeries]:
    if len(results) == 1:
        return results[0]
    return results
