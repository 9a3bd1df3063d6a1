"""Helper exceptions."""


class HelperError(Exception):
    """Raised when a helper's underlying browser or HTTP call fails."""

    pass


class ApiValidationError(HelperError, AssertionError):
    """Raised when an API response does not match expectations."""

    pass
