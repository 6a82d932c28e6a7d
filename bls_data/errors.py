"""Exceptions and warnings raised by the BLS client."""


class BlsError(Exception):
    """Base class for fatal client errors."""


class TransportFailure(BlsError):
    """The HTTP request never produced a response."""


class ApiStatusError(BlsError):
    """The API answered with a documented failure status code."""

    def __init__(self, status: int, reason: str) -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"API request failed with status {status}: {reason}")


class UnexpectedStatusError(BlsError):
    """The API answered with a status code we have no mapping for."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"API request failed unexpectedly with status {status}")


class ResponseShapeError(BlsError):
    """The response body does not match the documented envelope."""


class UnsupportedFrequency(BlsError):
    """An observation carries a period code we cannot turn into a date."""

    def __init__(self, period: str) -> None:
        self.period = period
        super().__init__(f"Data of frequency {period!r} not implemented")


class MalformedValue(BlsError):
    """An observation value is not a decimal number."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Observation value {value!r} is not a decimal number")


class InvalidDateRange(BlsError):
    """The resolved year range cannot be requested."""

    def __init__(self, startyear: int, endyear: int, reason: str) -> None:
        self.startyear = startyear
        self.endyear = endyear
        super().__init__(f"Invalid year range {startyear}-{endyear}: {reason}")


class InvalidKeyError(BlsError, ValueError):
    """A registration key is not a valid hexadecimal key."""


class BlsWarning(UserWarning):
    """Base class for recoverable conditions reported without raising."""


class RequestFailed(BlsWarning):
    """The API envelope reported a failed request; sentinels were returned."""


class InsufficientQuota(BlsWarning):
    """Not enough requests remain today; nothing was sent."""
