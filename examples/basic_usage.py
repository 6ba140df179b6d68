"""Basic usage examples for the Dark Sky client.

Set DARKSKY_API_KEY in the environment before running.
"""

import asyncio
import os

from darksky import DarkSkyClient, DarkSkyError, Lang, Units

API_KEY = os.environ.get("DARKSKY_API_KEY", "")
LATITUDE = "37.8267"
LONGITUDE = "-122.4233"


async def current_example(client: DarkSkyClient) -> None:
    """Get the current forecast."""
    forecast = await client.get_forecast(LATITUDE, LONGITUDE, units=Units.US)

    print("=== Current Weather ===")
    c = forecast.currently
    print(f"Location: {forecast.latitude}, {forecast.longitude} ({forecast.timezone})")
    print(f"Summary: {c.summary}")
    print(f"Temperature: {c.temperature}°F (feels like {c.apparent_temperature}°F)")
    print(f"Humidity: {c.humidity:.0%}")
    print(f"Wind: {c.wind_speed} mph from {c.wind_bearing}°")
    print(f"API calls today: {forecast.api_calls}")


async def daily_example(client: DarkSkyClient) -> None:
    """Get the week ahead in SI units and German."""
    forecast = await client.get_forecast(
        LATITUDE, LONGITUDE, units=Units.SI, lang=Lang.GERMAN
    )

    print("\n=== 7-Day Forecast ===")
    print(forecast.daily.summary)
    for day in forecast.daily.data:
        date = day.timestamp().date()
        print(
            f"{date}: {day.temperature_min}°C - {day.temperature_max}°C, "
            f"precipitation: {day.precip_probability:.0%}"
        )

    for alert in forecast.alerts:
        print(f"ALERT [{alert.severity}] {alert.title}: {alert.uri}")


async def time_machine_example(client: DarkSkyClient) -> None:
    """Get the conditions on 2020-01-01 00:00 UTC."""
    forecast = await client.get_forecast(LATITUDE, LONGITUDE, time="1577836800")

    print("\n=== Time Machine ===")
    for hour in forecast.hourly.data[:6]:
        print(f"{hour.timestamp()}: {hour.temperature}°F, {hour.summary}")


async def dataframe_example(client: DarkSkyClient) -> None:
    """Convert to pandas DataFrame."""
    try:
        from darksky.dataframe import to_dataframe

        import pandas  # noqa: F401
    except ImportError:
        print("\n=== DataFrame Example ===")
        print("Install pandas: pip install darksky[dataframe]")
        return

    forecast = await client.get_forecast(LATITUDE, LONGITUDE)
    df = to_dataframe(forecast, block="hourly")

    print("\n=== DataFrame Example ===")
    print(f"Shape: {df.shape}")
    print(df[["time", "temperature", "precip_probability"]].head())


async def main() -> None:
    """Run all examples."""
    async with DarkSkyClient(API_KEY) as client:
        try:
            await current_example(client)
            await daily_example(client)
            await time_machine_example(client)
            await dataframe_example(client)
        except DarkSkyError as e:
            print(f"Request failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
