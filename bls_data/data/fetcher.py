"""Single request against the BLS timeseries endpoint."""

import logging
import warnings

from bls_data.config import CATALOG_FAIL_PHRASES, STATUS_CODE_REASONS
from bls_data.data.connection import BlsConnection
from bls_data.data.periods import parse_observation
from bls_data.data.response import Envelope
from bls_data.errors import (
    ApiStatusError,
    RequestFailed,
    ResponseShapeError,
    UnexpectedStatusError,
)
from bls_data.models import BlsSeries


logger = logging.getLogger(__name__)

# 202 means "Your request is processing"; the body is parsed the same way
ACCEPTED_STATUSES = (200, 202)


def build_payload(
    connection: BlsConnection,
    series: list[str],
    startyear: int,
    endyear: int,
    catalog: bool,
) -> dict:
    payload = {
        "seriesid": list(series),
        "startyear": startyear,
        "endyear": endyear,
        "catalog": catalog,
    }
    if connection.key:
        payload["registrationKey"] = connection.key
    return payload


def catalog_available(messages: list[str]) -> bool:
    """False if any message says catalog data could not be returned."""
    lowered = [m.lower() for m in messages]
    return not any(
        phrase in message for message in lowered for phrase in CATALOG_FAIL_PHRASES
    )


def fetch_batch(
    connection: BlsConnection,
    series: list[str],
    startyear: int,
    endyear: int,
    catalog: bool = False,
) -> list[BlsSeries]:
    """
    Fetch one year window for a batch of series in a single request.

    The caller keeps the batch within the connection's per-request limits.

    Args:
        connection: BLS connection, its request count is updated
        series: BLS series IDs
        startyear: First year, inclusive
        endyear: Last year, inclusive
        catalog: Whether to request catalog metadata

    Returns:
        One BlsSeries per requested ID, in request order. All of them are
        empty sentinels if the API reported a failed request.

    Raises:
        TransportFailure: If no response was received
        ApiStatusError: For a documented failure status code
        UnexpectedStatusError: For any other non-success status code
        ResponseShapeError: If the body does not match the envelope
    """
    n_series = len(series)
    payload = build_payload(connection, series, startyear, endyear, catalog)
    logger.debug(f"POST {connection.url} {payload.get('seriesid')} {startyear}-{endyear}")

    response = connection.post(payload)
    status = response.status_code

    if status not in ACCEPTED_STATUSES:
        if status in STATUS_CODE_REASONS:
            raise ApiStatusError(status, STATUS_CODE_REASONS[status])
        logger.debug(f"Unexpected response body: {response.text[:500]}")
        raise UnexpectedStatusError(status)

    try:
        body = response.json()
    except ValueError as e:
        raise ResponseShapeError(f"Response body is not valid JSON: {e}") from e
    connection.record_request()

    envelope = Envelope.from_json(body)

    if not envelope.succeeded:
        message = "; ".join(envelope.messages) or "<no message returned>"
        logger.warning(f"API request failed with status {envelope.status}: {message}")
        warnings.warn(
            f"API request failed with status {envelope.status}: {message}",
            RequestFailed,
            stacklevel=2,
        )
        return [BlsSeries.empty() for _ in range(n_series)]

    catalog_okay = catalog and catalog_available(envelope.messages)
    if catalog and not catalog_okay:
        logger.warning(f"Catalog data unavailable: {'; '.join(envelope.messages)}")

    if len(envelope.series) != n_series:
        raise ResponseShapeError(
            f"Requested {n_series} series, response contains {len(envelope.series)}"
        )

    out = []
    for fragment in envelope.series:
        rows = [parse_observation(obs) for obs in fragment.observations]
        catalog_text = fragment.catalog_text() if catalog_okay else ""
        out.append(BlsSeries.from_rows(fragment.series_id, rows, catalog_text))

    logger.info(
        f"  {startyear}-{endyear}: {sum(len(s.data) for s in out)} observations "
        f"for {n_series} series"
    )
    return out
