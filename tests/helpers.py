"""Builders for forecast payloads and observations used across tests."""

from fieldrisk.models import Observation


def make_payload(temperature=5.0, windspeed=10.0, precipitation=None, snowfall=None, elevation=None):
    """Build an Open-Meteo style forecast payload."""
    payload = {
        "current_weather": {
            "temperature": temperature,
            "windspeed": windspeed,
            "time": "2026-01-15T10:00",
        },
        "hourly": {},
    }
    if precipitation is not None:
        payload["hourly"]["precipitation"] = precipitation
    if snowfall is not None:
        payload["hourly"]["snowfall"] = snowfall
    if elevation is not None:
        payload["elevation"] = elevation
    return payload


def make_observation(temp=10.0, wind=10.0, rain=0.0, snow=0.0, elevation=None):
    return Observation(
        temperature_c=temp,
        wind_speed_kph=wind,
        max_rain_mm=rain,
        max_snow_cm=snow,
        elevation_m=elevation,
    )
