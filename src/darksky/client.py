"""Async client for the Dark Sky forecast API.

This module provides DarkSkyClient and a one-shot get_forecast() helper.
A lookup is a single GET request: the URL is built from the key, the
coordinates, an optional time and the units/lang parameters, the JSON body
is decoded into a Forecast, and two diagnostic values are read from the
response headers.

Nothing is cached or retried, and the parameters are not validated
locally. Coordinates, time, units and lang are written into the URL
verbatim, so malformed values are reported by the API itself.

Example:
    Fetch the current forecast::

        import asyncio
        from darksky import DarkSkyClient, Lang, Units

        async def main():
            async with DarkSkyClient("my-key") as client:
                forecast = await client.get_forecast(
                    "37.8267", "-122.4233", units=Units.SI, lang=Lang.GERMAN
                )
                print(forecast.currently.summary)
                print(f"API calls today: {forecast.api_calls}")

        asyncio.run(main())

    Time Machine request for a past instant::

        forecast = await client.get_forecast(
            "37.8267", "-122.4233", time="1577836800"
        )
"""

import logging
import re
from enum import Enum
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError

from .exceptions import DarkSkyAPIError, DarkSkyConnectionError, DarkSkyDecodeError
from .models import ErrorResponse, Forecast
from .types import (
    API_CALLS_HEADER,
    BASE_URL,
    DEFAULT_TIMEOUT,
    NOW,
    RESPONSE_TIME_HEADER,
    Lang,
    Units,
)

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _param(value: Union[Enum, str, float]) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_url(
    api_key: str,
    latitude: Union[str, float],
    longitude: Union[str, float],
    time: str = NOW,
    units: Union[Units, str] = Units.US,
    lang: Union[Lang, str] = Lang.ENGLISH,
    *,
    base_url: str = BASE_URL,
) -> str:
    """Build the request URL for a forecast lookup.

    The time segment is appended to the coordinates unless ``time`` is
    "now", in which case it is left out entirely. No segment is escaped.

    Args:
        api_key: Dark Sky secret key.
        latitude: Latitude, as given by the caller.
        longitude: Longitude, as given by the caller.
        time: "now" or a UNIX timestamp / ISO 8601 time for a Time Machine
            request. Defaults to "now".
        units: Units member or raw string. Defaults to Units.US.
        lang: Lang member or raw string. Defaults to Lang.ENGLISH.
        base_url: API endpoint. Defaults to BASE_URL.

    Returns:
        The full request URL.

    Example:
        >>> build_url("key", "37.8267", "-122.4233")
        'https://api.darksky.net/forecast/key/37.8267,-122.4233?units=us&lang=en'
        >>> build_url("key", "37.8267", "-122.4233", "1577836800", Units.SI)
        'https://api.darksky.net/forecast/key/37.8267,-122.4233,1577836800?units=si&lang=en'
    """
    location = f"{_param(latitude)},{_param(longitude)}"
    if time != NOW:
        location = f"{location},{time}"
    return (
        f"{base_url}/{api_key}/{location}"
        f"?units={_param(units)}&lang={_param(lang)}"
    )


def parse_header_int(value: Optional[str]) -> int:
    """Parse an integer header value, falling back to 0.

    Missing, empty and non-integer values ("abc", "12.5", "185ms") all
    give 0. Never raises.

    Example:
        >>> parse_header_int("42")
        42
        >>> parse_header_int("abc")
        0
        >>> parse_header_int(None)
        0
    """
    if value is None:
        return 0
    value = value.strip()
    if not _INTEGER.fullmatch(value):
        if value:
            logger.debug(f"Ignoring non-integer header value {value!r}")
        return 0
    return int(value)


class DarkSkyClient:
    """Async client for the Dark Sky forecast API.

    Each get_forecast() call issues exactly one GET request. The client
    keeps an httpx.AsyncClient for connection reuse and holds no other
    state between calls.

    Args:
        api_key: Dark Sky secret key. Not validated locally.
        base_url: API endpoint. Defaults to BASE_URL.
        timeout: HTTP timeout in seconds for the internally created
            client. Defaults to 30.0.
        http_client: Optional caller-owned httpx.AsyncClient. Use it to
            supply a custom transport, proxies, TLS settings or timeouts.
            It is never closed by DarkSkyClient.

    Attributes:
        _api_key: The secret key.
        _base_url: API endpoint.
        _timeout: HTTP timeout in seconds.
        _client: Lazy-initialized or injected httpx.AsyncClient.
        _owns_client: Whether close() should close ``_client``.

    Example:
        Using as async context manager (recommended)::

            async with DarkSkyClient("my-key") as client:
                forecast = await client.get_forecast("37.8267", "-122.4233")

        Manual resource management::

            client = DarkSkyClient("my-key")
            try:
                forecast = await client.get_forecast("37.8267", "-122.4233")
            finally:
                await client.close()

        Substitute transport::

            transport = httpx.MockTransport(handler)
            async with httpx.AsyncClient(transport=transport) as http:
                client = DarkSkyClient("my-key", http_client=http)
                forecast = await client.get_forecast("37.8267", "-122.4233")
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "DarkSkyClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized.

        Lazily creates the httpx.AsyncClient if none was injected and none
        has been created yet.

        Returns:
            The httpx.AsyncClient used for requests.
        """
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and release resources.

        An injected client is left open for its owner to close. Safe to
        call multiple times.
        """
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _fetch(self, url: str) -> httpx.Response:
        """Issue the GET request and check its status.

        The response body is fully read before this returns, so the
        underlying stream is already released.

        Args:
            url: Full request URL.

        Returns:
            The successful httpx.Response.

        Raises:
            DarkSkyConnectionError: If the request could not be completed.
            DarkSkyAPIError: If the API answered with a non-2xx status.
        """
        client = await self._ensure_client()

        try:
            response = await client.get(url)
        except httpx.RequestError as e:
            raise DarkSkyConnectionError(f"Request error: {e}") from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DarkSkyAPIError(
                response.status_code, self._error_reason(response, e)
            ) from e

        return response

    @staticmethod
    def _error_reason(response: httpx.Response, error: httpx.HTTPStatusError) -> str:
        try:
            body = ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            return str(error)
        return body.error or str(error)

    def _decode(self, response: httpx.Response) -> Forecast:
        """Decode a response into a Forecast with header diagnostics set.

        Raises:
            DarkSkyDecodeError: If the body is not JSON or not a forecast.
        """
        try:
            data = response.json()
        except ValueError as e:
            raise DarkSkyDecodeError(f"Response is not valid JSON: {e}") from e

        try:
            forecast = Forecast.model_validate(data)
        except ValidationError as e:
            raise DarkSkyDecodeError(f"Unexpected forecast payload: {e}") from e

        forecast.api_calls = parse_header_int(response.headers.get(API_CALLS_HEADER))
        forecast.response_time = parse_header_int(
            response.headers.get(RESPONSE_TIME_HEADER)
        )
        return forecast

    async def get_forecast(
        self,
        latitude: Union[str, float],
        longitude: Union[str, float],
        time: str = NOW,
        units: Union[Units, str] = Units.US,
        lang: Union[Lang, str] = Lang.ENGLISH,
    ) -> Forecast:
        """Get the forecast for a location.

        Args:
            latitude: Latitude, forwarded verbatim.
            longitude: Longitude, forwarded verbatim.
            time: "now" for the current forecast, or a UNIX timestamp /
                ISO 8601 time for a Time Machine request. Defaults to "now".
            units: Units member or raw string. Defaults to Units.US.
            lang: Lang member or raw string. Defaults to Lang.ENGLISH.

        Returns:
            The decoded Forecast, with ``api_calls`` and ``response_time``
            taken from the response headers.

        Raises:
            DarkSkyConnectionError: If the HTTP request fails.
            DarkSkyAPIError: If the API returns a non-2xx status.
            DarkSkyDecodeError: If the body cannot be decoded.

        Example:
            >>> async with DarkSkyClient("my-key") as client:
            ...     forecast = await client.get_forecast(
            ...         "37.8267", "-122.4233", units=Units.AUTO
            ...     )
            ...     for day in forecast.daily.data:
            ...         print(day.timestamp(), day.temperature_max)
        """
        url = build_url(
            self._api_key,
            latitude,
            longitude,
            time,
            units,
            lang,
            base_url=self._base_url,
        )
        logger.debug(
            f"Fetching forecast for ({latitude}, {longitude}) at {time} "
            f"units={_param(units)} lang={_param(lang)}"
        )

        response = await self._fetch(url)
        return self._decode(response)


async def get_forecast(
    api_key: str,
    latitude: Union[str, float],
    longitude: Union[str, float],
    time: str = NOW,
    units: Union[Units, str] = Units.US,
    lang: Union[Lang, str] = Lang.ENGLISH,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Forecast:
    """Fetch a single forecast without managing a client.

    Opens a DarkSkyClient, performs one lookup and closes it again. See
    DarkSkyClient.get_forecast() for the parameters and errors.

    Example:
        >>> forecast = await get_forecast(
        ...     "my-key", "37.8267", "-122.4233", units=Units.US, lang=Lang.ENGLISH
        ... )
    """
    async with DarkSkyClient(api_key, http_client=http_client) as client:
        return await client.get_forecast(latitude, longitude, time, units, lang)
