"""Client for the BLS Public Data API timeseries endpoint."""

from bls_data.config import Settings
from bls_data.data import BlsConnection, fetch_batch, get_data
from bls_data.errors import (
    ApiStatusError,
    BlsError,
    BlsWarning,
    InsufficientQuota,
    InvalidDateRange,
    InvalidKeyError,
    MalformedValue,
    RequestFailed,
    ResponseShapeError,
    TransportFailure,
    UnexpectedStatusError,
    UnsupportedFrequency,
)
from bls_data.models import ApiTier, BlsSeries

__all__ = [
    "ApiStatusError",
    "ApiTier",
    "BlsConnection",
    "BlsError",
    "BlsSeries",
    "BlsWarning",
    "InsufficientQuota",
    "InvalidDateRange",
    "InvalidKeyError",
    "MalformedValue",
    "RequestFailed",
    "ResponseShapeError",
    "Settings",
    "TransportFailure",
    "UnexpectedStatusError",
    "UnsupportedFrequency",
    "fetch_batch",
    "get_data",
]
