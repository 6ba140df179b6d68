"""Types and constants for the Dark Sky API client.

This module defines the request enumerations and configuration constants
used throughout the Dark Sky client.

Both enumerations are ``str`` subclasses, so members compare equal to their
raw code. The client never validates these parameters locally: any plain
string is forwarded to the API as-is.

Example:
    Requesting SI units in French::

        from darksky import DarkSkyClient, Lang, Units

        async with DarkSkyClient("my-key") as client:
            forecast = await client.get_forecast(
                "48.8566", "2.3522", units=Units.SI, lang=Lang.FRENCH
            )
"""

from enum import Enum


class Units(str, Enum):
    """Measurement system of the returned values.

    Attributes:
        CA: Same as SI, except wind speed and gust in km/h.
        SI: International System of Units.
        US: Imperial units (the API default).
        UK: Same as SI, except wind speed and gust in mph and visibility
            in miles.
        AUTO: Selected automatically from the geographic location.

    Example:
        >>> Units.US.value
        'us'
        >>> Units.AUTO == "auto"
        True
    """

    CA = "ca"
    SI = "si"
    US = "us"
    UK = "uk"
    AUTO = "auto"


class Lang(str, Enum):
    """Language of text summaries in the response."""

    ARABIC = "ar"
    AZERBAIJANI = "az"
    BELARUSIAN = "be"
    BOSNIAN = "bs"
    CATALAN = "ca"
    CZECH = "cs"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    SPANISH = "es"
    ESTONIAN = "et"
    FRENCH = "fr"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    ICELANDIC = "is"
    CORNISH = "kw"
    NORWEGIAN_BOKMAL = "nb"
    DUTCH = "nl"
    POLISH = "pl"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SERBIAN = "sr"
    SWEDISH = "sv"
    TELUGU = "te"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    IGPAY_ATINLAY = "x-pig-latin"
    SIMPLIFIED_CHINESE = "zh"
    TRADITIONAL_CHINESE = "zh-tw"


BASE_URL = "https://api.darksky.net/forecast"
"""str: Base URL of the Dark Sky Forecast API.

Requests are built as ``{BASE_URL}/{key}/{lat},{lon}[,{time}]``.
"""

NOW = "now"
"""str: Time token requesting the current forecast.

When passed as ``time`` the time segment is left out of the URL entirely,
giving a forecast request instead of a Time Machine request.
"""

DEFAULT_TIMEOUT = 30.0
"""float: Default HTTP timeout in seconds for clients created internally.

Ignored when an ``httpx.AsyncClient`` is injected; the injected client's
own timeout applies.
"""

API_CALLS_HEADER = "X-Forecast-API-Calls"
"""str: Response header carrying the number of API calls made today."""

RESPONSE_TIME_HEADER = "X-Response-Time"
"""str: Response header carrying the server-side response time."""
