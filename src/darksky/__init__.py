"""Dark Sky API async client for weather forecasts.

This package fetches forecasts from the Dark Sky API and decodes them into
typed pydantic models. A lookup takes an API key, a latitude and
longitude, an optional time, a unit system and a language, and performs a
single GET request.

Key features:
    - Current forecast (time="now") or Time Machine request for any instant
    - Every field of the response schema modelled, all optional
    - API call count and response time read from the response headers
    - Injectable httpx.AsyncClient for custom transports and testing
    - Optional DataFrame conversion via darksky.dataframe module

Request URL:
    ``{BASE_URL}/{key}/{latitude},{longitude}[,{time}]?units=..&lang=..``

    The time segment is omitted when time is "now". Nothing is validated
    or escaped locally; the API reports bad parameters itself.

Example:
    Fetch a forecast::

        import asyncio
        from darksky import DarkSkyClient, Lang, Units

        async def main():
            async with DarkSkyClient("my-key") as client:
                forecast = await client.get_forecast(
                    "37.8267", "-122.4233", units=Units.US, lang=Lang.ENGLISH
                )
                print(forecast.currently.summary)
                for hour in forecast.hourly.data:
                    print(hour.timestamp(), hour.temperature)

        asyncio.run(main())

    One-shot helper::

        from darksky import get_forecast

        forecast = await get_forecast("my-key", "37.8267", "-122.4233")

See Also:
    - Dark Sky API docs: https://darksky.net/dev/docs
"""

from .client import DarkSkyClient, build_url, get_forecast, parse_header_int
from .exceptions import (
    DarkSkyAPIError,
    DarkSkyConnectionError,
    DarkSkyDecodeError,
    DarkSkyError,
)
from .models import Alert, DataBlock, DataPoint, ErrorResponse, Flags, Forecast
from .types import (
    API_CALLS_HEADER,
    BASE_URL,
    DEFAULT_TIMEOUT,
    NOW,
    RESPONSE_TIME_HEADER,
    Lang,
    Units,
)

__all__ = [
    "DarkSkyClient",
    "get_forecast",
    "build_url",
    "parse_header_int",
    "Forecast",
    "DataPoint",
    "DataBlock",
    "Alert",
    "Flags",
    "ErrorResponse",
    "Units",
    "Lang",
    "DarkSkyError",
    "DarkSkyAPIError",
    "DarkSkyConnectionError",
    "DarkSkyDecodeError",
    "BASE_URL",
    "NOW",
    "DEFAULT_TIMEOUT",
    "API_CALLS_HEADER",
    "RESPONSE_TIME_HEADER",
]
