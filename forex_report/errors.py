"""Error taxonomy for the report pipeline."""


class ForexReportError(Exception):
    """Base class for all pipeline failures."""

    kind = "error"


class ApiError(ForexReportError):
    """Failure at the remote API boundary."""

    kind = "api"


class TransportError(ApiError):
    """Connection, DNS, or timeout failure before a response arrived."""

    kind = "transport"


class HttpStatusError(ApiError):
    """Non-2xx status from the remote API."""

    kind = "http_status"

    def __init__(self, code: int, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(f"Failed to fetch data (Status: {code} - {message})")


class MalformedResponseError(ApiError):
    """A 2xx body that does not follow the observations schema."""

    kind = "malformed_response"


class RemoteValidationError(ApiError):
    """A 2xx body carrying an ``error`` field instead of observations."""

    kind = "remote_validation"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def error(self) -> str:
        return self.message


class EmptySeriesError(ForexReportError, ArithmeticError):
    """Aggregation requested over zero observations."""

    kind = "empty_series"


class ReportWriteError(ForexReportError, OSError):
    """An artifact could not be written."""

    kind = "io"
