import pytest


CURRENTLY = {
    "time": 1577836800,
    "summary": "Partly Cloudy",
    "icon": "partly-cloudy-day",
    "nearestStormDistance": 42.0,
    "nearestStormBearing": 270.0,
    "precipIntensity": 0.0,
    "precipProbability": 0.0,
    "temperature": 52.31,
    "apparentTemperature": 52.31,
    "dewPoint": 44.1,
    "humidity": 0.74,
    "pressure": 1021.4,
    "windSpeed": 4.52,
    "windGust": 8.91,
    "windBearing": 284,
    "cloudCover": 0.46,
    "uvIndex": 2.0,
    "visibility": 10.0,
    "ozone": 281.7,
}

DAILY_POINT = {
    "time": 1577865600,
    "summary": "Light rain in the evening.",
    "icon": "rain",
    "sunriseTime": 1577891940,
    "sunsetTime": 1577926920,
    "moonPhase": 0.21,
    "precipIntensity": 0.0021,
    "precipIntensityMax": 0.0134,
    "precipIntensityMaxTime": 1577919600,
    "precipProbability": 0.38,
    "precipAccumulation": 0.0,
    "precipType": "rain",
    "temperature": 55.0,
    "temperatureMin": 45.2,
    "temperatureMinTime": 1577887200,
    "temperatureMax": 58.9,
    "temperatureMaxTime": 1577912400,
    "apparentTemperature": 55.0,
    "apparentTemperatureMin": 43.0,
    "apparentTemperatureMinTime": 1577887200,
    "apparentTemperatureMax": 58.4,
    "apparentTemperatureMaxTime": 1577912400,
    "nearestStormBearing": 0.0,
    "nearestStormDistance": 0.0,
    "dewPoint": 43.9,
    "humidity": 0.8,
    "windSpeed": 5.8,
    "windGust": 17.2,
    "windGustTime": 1577930400,
    "windBearing": 196,
    "visibility": 9.4,
    "cloudCover": 0.69,
    "pressure": 1019.3,
    "ozone": 286.3,
    "uvIndex": 3.0,
    "uvIndexTime": 1577908800,
}


@pytest.fixture
def forecast_payload():
    return {
        "latitude": 37.8267,
        "longitude": -122.4233,
        "timezone": "America/Los_Angeles",
        "offset": -8.0,
        "currently": dict(CURRENTLY),
        "minutely": {
            "summary": "Partly cloudy for the hour.",
            "icon": "partly-cloudy-day",
            "data": [
                {"time": 1577836800, "precipIntensity": 0.0, "precipProbability": 0.0},
                {"time": 1577836860, "precipIntensity": 0.001, "precipProbability": 0.02},
            ],
        },
        "hourly": {
            "summary": "Mostly cloudy throughout the day.",
            "icon": "partly-cloudy-night",
            "data": [
                {"time": 1577840400, "temperature": 50.1},
                {"time": 1577844000, "temperature": 49.3},
                {"time": 1577847600, "temperature": 48.8},
            ],
        },
        "daily": {
            "summary": "Rain on Thursday.",
            "icon": "rain",
            "data": [dict(DAILY_POINT)],
        },
        "alerts": [
            {
                "title": "Flood Watch",
                "regions": ["San Francisco", "Marin"],
                "severity": "watch",
                "description": "A flood watch is in effect.",
                "time": 1577836800,
                "expires": 1577923200,
                "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=1",
            },
            {
                "title": "Wind Advisory",
                "regions": ["San Mateo"],
                "severity": "advisory",
                "description": "Gusty winds expected.",
                "time": 1577840400,
                "expires": 1577880000,
                "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=2",
            },
        ],
        "flags": {
            "darksky-unavailable": "radar offline",
            "darksky-stations": ["KMUX", "KDAX"],
            "datapoint-stations": ["dp-1"],
            "isd-stations": ["724943-99999", "745039-99999"],
            "lamp-stations": ["KSFO", "KOAK"],
            "madis-stations": ["AU915", "C5988"],
            "metar-stations": ["KSFO"],
            "metno-license": "Based on data from the Norwegian Meteorological Institute.",
            "nearest-station": 1.84,
            "sources": ["cmc", "gfs", "hrrr", "isd"],
            "units": "us",
        },
        "code": 200,
    }
