"""Exceptions for the Dark Sky API client.

All exceptions inherit from DarkSkyError, so a caller that does not care
why a lookup failed can catch a single class. The subclasses tell a
transport failure apart from an error status and from an undecodable body.

Example:
    Catching all Dark Sky errors::

        from darksky import DarkSkyError, get_forecast

        try:
            forecast = await get_forecast("my-key", "37.8267", "-122.4233")
        except DarkSkyError as e:
            print(f"Dark Sky error: {e}")

    Catching specific errors::

        from darksky import DarkSkyAPIError, DarkSkyDecodeError

        try:
            forecast = await client.get_forecast("37.8267", "-122.4233")
        except DarkSkyAPIError as e:
            print(f"HTTP {e.status_code}: {e.reason}")
        except DarkSkyDecodeError as e:
            print(f"Unexpected payload: {e}")
"""


class DarkSkyError(Exception):
    """Base exception for all Dark Sky errors."""

    pass


class DarkSkyConnectionError(DarkSkyError):
    """Exception raised when the request could not be completed.

    Covers DNS failures, refused connections, TLS errors and timeouts.
    The underlying httpx exception is chained as ``__cause__``.

    Example:
        >>> try:
        ...     await client.get_forecast("37.8267", "-122.4233")
        ... except DarkSkyConnectionError as e:
        ...     print(f"Network error: {e}")
    """

    pass


class DarkSkyAPIError(DarkSkyError):
    """Exception raised when the API answers with a non-2xx status.

    Args:
        status_code: HTTP status code of the response.
        reason: Error message from the API's JSON error body, or the
            transport's description of the status when the body has none.

    Attributes:
        status_code: HTTP status code of the response.
        reason: Human-readable error message.

    Example:
        >>> raise DarkSkyAPIError(400, "The given location is invalid.")
        DarkSkyAPIError: API error 400: The given location is invalid.
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API error {status_code}: {reason}")


class DarkSkyDecodeError(DarkSkyError):
    """Exception raised when the response body cannot be decoded.

    Either the body is not valid JSON or it does not have the shape of a
    forecast. The JSON or pydantic error is chained as ``__cause__``.
    """

    pass
