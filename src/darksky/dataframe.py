"""DataFrame conversion utilities for Dark Sky responses.

This module provides functions to convert forecast objects to pandas
DataFrames for easier data analysis and manipulation.

Requirements:
    pandas >= 2.0 must be installed. Install with:
        pip install pandas
    Or install darksky with the dataframe extra:
        pip install darksky[dataframe]

Functions:
    to_dataframe: Convert a DataBlock, DataPoint or Forecast to a DataFrame

Example:
    Basic usage::

        from darksky import DarkSkyClient
        from darksky.dataframe import to_dataframe

        async with DarkSkyClient("my-key") as client:
            forecast = await client.get_forecast("37.8267", "-122.4233")

        hourly = to_dataframe(forecast.hourly)
        print(hourly[["time", "temperature", "precip_probability"]])

        daily = to_dataframe(forecast, block="daily")
        print(daily.head())
"""

from typing import Union

from .models import EPOCH_FIELDS, DataBlock, DataPoint, Forecast

BLOCKS = ("currently", "minutely", "hourly", "daily")


def _check_pandas() -> None:
    """Check if pandas is installed and raise informative error if not."""
    try:
        import pandas  # noqa: F401
    except ImportError as e:
        raise ImportError(
            "pandas is required for DataFrame conversion. "
            "Install it with: pip install pandas"
        ) from e


def to_dataframe(
    obj: Union[Forecast, DataBlock, DataPoint],
    block: str = "hourly",
) -> "pd.DataFrame":
    """Convert forecast data to a pandas DataFrame.

    A DataBlock gives one row per DataPoint, in chronological order. A
    DataPoint gives a single row. For a Forecast, ``block`` selects which
    part to convert. Timestamp columns (``time`` and every ``*_time``)
    are converted to UTC datetimes, with zero (absent) mapped to NaT.

    Args:
        obj: DataBlock, DataPoint or Forecast to convert.
        block: Part of a Forecast to convert: "currently", "minutely",
            "hourly" or "daily". Ignored for other inputs. Defaults to
            "hourly".

    Returns:
        pandas DataFrame with one column per DataPoint attribute.

    Raises:
        ImportError: If pandas is not installed.
        ValueError: If the input type or block name is not recognized.

    Example:
        >>> df = to_dataframe(forecast, block="daily")
        >>> df[["time", "temperature_max", "temperature_min"]]
    """
    _check_pandas()
    import pandas as pd

    if isinstance(obj, Forecast):
        if block not in BLOCKS:
            raise ValueError(
                f"Unknown block: {block!r}. Expected one of {', '.join(BLOCKS)}."
            )
        obj = getattr(obj, block)

    if isinstance(obj, DataBlock):
        columns = list(DataPoint.model_fields)
        df = pd.DataFrame([p.model_dump() for p in obj.data], columns=columns)
    elif isinstance(obj, DataPoint):
        df = pd.DataFrame([obj.model_dump()])
    else:
        raise ValueError(
            f"Unsupported type: {type(obj).__name__}. "
            "Expected Forecast, DataBlock, or DataPoint."
        )

    for column in EPOCH_FIELDS:
        seconds = df[column].where(df[column] != 0)
        df[column] = pd.to_datetime(seconds, unit="s", utc=True)
    return df


__all__ = ["to_dataframe"]
