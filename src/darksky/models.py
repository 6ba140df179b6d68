"""Pydantic models for Dark Sky API responses.

This module defines the data models a forecast response is decoded into.
The API schema is sparse: which DataPoint fields are present depends on
the block (currently, minutely, hourly, daily) and on the location, so
every field is optional and falls back to its type's zero value.

Key model groups:
    1. **DataPoint**: weather conditions at one instant or over one day
    2. **DataBlock**: a summary plus a chronological list of DataPoints
    3. **Alert / Flags**: severe weather alerts and provenance metadata
    4. **Forecast**: the full response
    5. **ErrorResponse**: the body of a non-2xx response

Note:
    JSON keys are camelCase (``precipIntensityMax``) except in Flags,
    which uses hyphenated keys (``darksky-stations``). Attributes are
    snake_case. Both spellings are accepted on input; ``model_dump(
    by_alias=True)`` reproduces the API's spelling.

Example:
    Decoding a response body::

        forecast = Forecast.model_validate_json(body)
        print(forecast.currently.temperature)
        for point in forecast.hourly.data:
            print(point.time, point.precip_probability)
"""

from datetime import datetime
from datetime import timezone as dt_timezone
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

EPOCH_FIELDS = (
    "time",
    "sunrise_time",
    "sunset_time",
    "precip_intensity_max_time",
    "temperature_min_time",
    "temperature_max_time",
    "apparent_temperature_min_time",
    "apparent_temperature_max_time",
    "wind_gust_time",
    "uv_index_time",
)
"""tuple[str, ...]: DataPoint attributes holding UNIX timestamps."""


class _Record(BaseModel):
    """Base for all response models.

    Unknown keys are ignored and explicit nulls are dropped before
    validation, so that ``null`` and a missing key both give the field's
    zero value.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class DataPoint(_Record):
    """Weather conditions at a single point in time.

    Times are UNIX timestamps in seconds. Units of the measurements depend
    on the ``units`` request parameter (see ``Flags.units``).

    Attributes:
        time: Start of the period this point covers.
        summary: Human-readable text summary.
        icon: Machine-readable summary (e.g. "clear-day", "rain").
        sunrise_time: Sunrise on the given day (daily only).
        sunset_time: Sunset on the given day (daily only).
        moon_phase: Fractional lunation, 0 new moon to 0.5 full moon
            (daily only).
        precip_intensity: Precipitation intensity.
        precip_intensity_max: Maximum precipitation intensity in the day.
        precip_intensity_max_time: Time of ``precip_intensity_max``.
        precip_probability: Probability of precipitation, 0 to 1.
        precip_accumulation: Snowfall accumulation.
        precip_type: "rain", "snow" or "sleet".
        temperature: Air temperature.
        temperature_min: Daily minimum (older responses).
        temperature_min_time: Time of ``temperature_min``.
        temperature_max: Daily maximum (older responses).
        temperature_max_time: Time of ``temperature_max``.
        apparent_temperature: "Feels like" temperature.
        apparent_temperature_min: Daily minimum apparent temperature.
        apparent_temperature_min_time: Time of
            ``apparent_temperature_min``.
        apparent_temperature_max: Daily maximum apparent temperature.
        apparent_temperature_max_time: Time of
            ``apparent_temperature_max``.
        nearest_storm_bearing: Direction to the nearest storm in degrees
            (currently only).
        nearest_storm_distance: Distance to the nearest storm (currently
            only).
        dew_point: Dew point.
        humidity: Relative humidity, 0 to 1.
        wind_speed: Wind speed.
        wind_gust: Wind gust speed.
        wind_gust_time: Time of the maximum wind gust.
        wind_bearing: Direction the wind comes from, degrees from north.
        visibility: Average visibility, capped at 10 miles.
        cloud_cover: Fraction of sky covered by clouds, 0 to 1.
        pressure: Sea-level air pressure.
        ozone: Columnar density of total atmospheric ozone in Dobson.
        uv_index: UV index.
        uv_index_time: Time of the maximum UV index.
    """

    time: int = 0
    summary: str = ""
    icon: str = ""
    sunrise_time: int = 0
    sunset_time: int = 0
    moon_phase: float = 0.0
    precip_intensity: float = 0.0
    precip_intensity_max: float = 0.0
    precip_intensity_max_time: int = 0
    precip_probability: float = 0.0
    precip_accumulation: float = 0.0
    precip_type: str = ""
    temperature: float = 0.0
    temperature_min: float = 0.0
    temperature_min_time: int = 0
    temperature_max: float = 0.0
    temperature_max_time: int = 0
    apparent_temperature: float = 0.0
    apparent_temperature_min: float = 0.0
    apparent_temperature_min_time: int = 0
    apparent_temperature_max: float = 0.0
    apparent_temperature_max_time: int = 0
    nearest_storm_bearing: float = 0.0
    nearest_storm_distance: float = 0.0
    dew_point: float = 0.0
    humidity: float = 0.0
    wind_speed: float = 0.0
    wind_gust: float = 0.0
    wind_gust_time: int = 0
    wind_bearing: int = 0
    visibility: float = 0.0
    cloud_cover: float = 0.0
    pressure: float = 0.0
    ozone: float = 0.0
    uv_index: float = 0.0
    uv_index_time: int = 0

    def timestamp(self, field: str = "time") -> Optional[datetime]:
        """Return an epoch field as an aware UTC datetime.

        Args:
            field: Name of a timestamp attribute. Defaults to "time".

        Returns:
            The UTC datetime, or None when the field is zero (absent).

        Raises:
            ValueError: If ``field`` is not a timestamp attribute.

        Example:
            >>> DataPoint(time=1577836800).timestamp()
            datetime.datetime(2020, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
        """
        if field not in EPOCH_FIELDS:
            raise ValueError(f"{field!r} is not a timestamp field")
        value = getattr(self, field)
        if not value:
            return None
        return datetime.fromtimestamp(value, tz=dt_timezone.utc)


class DataBlock(_Record):
    """Weather conditions over a period, one DataPoint per step.

    Attributes:
        summary: Human-readable summary of the whole block.
        icon: Machine-readable summary of the whole block.
        data: DataPoints in chronological order.
    """

    summary: str = ""
    icon: str = ""
    data: list[DataPoint] = Field(default_factory=list)


class Alert(_Record):
    """Severe weather alert issued for the requested location.

    Attributes:
        title: Brief description of the alert.
        regions: Names of the regions covered by the alert.
        severity: "advisory", "watch" or "warning".
        description: Detailed description of the alert.
        time: Time the alert was issued.
        expires: Time the alert expires.
        uri: Link to the alert's full text.
    """

    title: str = ""
    regions: list[str] = Field(default_factory=list)
    severity: str = ""
    description: str = ""
    time: int = 0
    expires: int = 0
    uri: str = ""




class Flags(_Record):
    """Metadata about where the forecast data came from.

    Keys are hyphenated in the API (``darksky-stations``). Older clients
    used misspelled keys for some of them (``isds-stations``,
    ``metars-stations``, ``metnol-license``); those are accepted on input.

    Attributes:
        darksky_unavailable: Present when Dark Sky data was unavailable
            for the request.
        darksky_stations: Dark Sky radar stations used.
        datapoint_stations: UK Met Office DataPoint stations used.
        isd_stations: NOAA Integrated Surface Database stations used.
        lamp_stations: NOAA LAMP stations used.
        madis_stations: NOAA MADIS stations used.
        metar_stations: METAR stations used.
        metno_license: License notice for data from the Norwegian
            Meteorological Institute.
        nearest_station: Distance to the nearest weather station.
        sources: Identifiers of every data source used.
        units: Units actually applied to the response.
    """

    darksky_unavailable: str = Field(default="", alias="darksky-unavailable")
    darksky_stations: list[str] = Field(
        default_factory=list, alias="darksky-stations"
    )
    datapoint_stations: list[str] = Field(
        default_factory=list, alias="datapoint-stations"
    )
    isd_stations: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("isd-stations", "isds-stations"),
        serialization_alias="isd-stations",
    )
    lamp_stations: list[str] = Field(default_factory=list, alias="lamp-stations")
    madis_stations: list[str] = Field(default_factory=list, alias="madis-stations")
    metar_stations: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("metar-stations", "metars-stations"),
        serialization_alias="metar-stations",
    )
    metno_license: str = Field(
        default="",
        validation_alias=AliasChoices("metno-license", "metnol-license"),
        serialization_alias="metno-license",
    )
    nearest_station: float = Field(default=0.0, alias="nearest-station")
    sources: list[str] = Field(default_factory=list)
    units: str = ""


class Forecast(_Record):
    """Full response of a forecast or Time Machine request.

    ``api_calls`` and ``response_time`` are filled from the
    ``X-Forecast-API-Calls`` and ``X-Response-Time`` headers after the body
    is decoded. ``code`` is only set when the body carries one.

    Attributes:
        latitude: Requested latitude.
        longitude: Requested longitude.
        timezone: IANA timezone name of the location (e.g.
            "America/Los_Angeles").
        offset: Current UTC offset of the location in hours.
        currently: Current conditions.
        minutely: Minute-by-minute conditions for the next hour.
        hourly: Hour-by-hour conditions for the next two days.
        daily: Day-by-day conditions for the next week.
        alerts: Severe weather alerts, in the order the API lists them.
        flags: Data provenance metadata.
        api_calls: Number of API calls made with the key today.
        code: Status code carried in the body, if any.
        response_time: Server-side response time from the headers.

    Example:
        >>> forecast = Forecast.model_validate({"latitude": 1.0})
        >>> forecast.latitude, forecast.hourly.data
        (1.0, [])
    """

    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    offset: float = 0.0
    currently: DataPoint = Field(default_factory=DataPoint)
    minutely: DataBlock = Field(default_factory=DataBlock)
    hourly: DataBlock = Field(default_factory=DataBlock)
    daily: DataBlock = Field(default_factory=DataBlock)
    alerts: list[Alert] = Field(default_factory=list)
    flags: Flags = Field(default_factory=Flags)
    api_calls: int = 0
    code: int = 0
    response_time: int = 0


class ErrorResponse(_Record):
    """Error body returned with a non-2xx status.

    Example:
        >>> # This is what an error response looks like
        >>> {"code": 400, "error": "The given location is invalid."}
    """

    code: int = 0
    error: str = ""
