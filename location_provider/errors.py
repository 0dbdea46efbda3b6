class AppError(Exception):
    """Base application error for the location provider service."""


class LocationProviderError(AppError):
    """Base error for IP2Location backend failures.

    Backends raise these internally and turn them into "no result" at `fetch`.
    """


class UpstreamServiceError(LocationProviderError):
    """Raised when the IP2Location web service fails or returns an unusable body."""


class DatabaseReadError(LocationProviderError):
    """Raised when the BIN database cannot be opened or read."""


class InvalidIpError(AppError):
    """Raised when no usable IP address can be taken from the request."""
