"""Plain-text summaries of weather, inputs and screening results."""

from typing import Optional

import config
from .models import Coordinates, Observation, RiskResult, UserInputs

NOT_AVAILABLE = "N/A"


def format_value(value) -> str:
    """Render a number without trailing zeros, or N/A when missing."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def basin_name(coords: Optional[Coordinates]) -> str:
    """Simplified offshore basin for a location, by latitude band."""
    if coords is None:
        return NOT_AVAILABLE
    for upper_lat, name in config.BASIN_BANDS:
        if coords.lat < upper_lat:
            return name
    return config.BASIN_NORTHERNMOST


def get_weather_summary(observation: Optional[Observation], location: str) -> str:
    """Generate a text summary of current weather conditions."""
    lines = [f"Current Weather – {location}"]

    if observation is None:
        lines.append("  No weather data yet.")
        return "\n".join(lines)

    lines.append(f"  Temperature: {format_value(observation.temperature_c)}°C")
    lines.append(f"  Wind Speed: {format_value(observation.wind_speed_kph)} km/h")
    lines.append(f"  Rain (max next {config.HORIZON_HOURS}h): {format_value(observation.max_rain_mm)} mm")
    lines.append(f"  Snow (max next {config.HORIZON_HOURS}h): {format_value(observation.max_snow_cm)} cm")
    if observation.elevation_m is not None:
        lines.append(f"  Elevation: {format_value(observation.elevation_m)} m a.s.l.")

    return "\n".join(lines)


def generate_report(
    location: str,
    observation: Optional[Observation],
    inputs: UserInputs,
    result: Optional[RiskResult],
    coords: Optional[Coordinates] = None,
) -> str:
    """
    Flatten a screening into a line-oriented field report.

    Each field is one `Label: value` line in a fixed order. Missing weather
    or coordinates render as N/A; an empty reason list renders as None.
    """
    obs = observation
    reasons = "None"
    if result is not None and result.reasons:
        reasons = ", ".join(result.reasons)

    lines = [
        "Field Risk Report",
        f"Location: {location}",
        f"Temperature: {format_value(obs.temperature_c if obs else None)} °C",
        f"Wind: {format_value(obs.wind_speed_kph if obs else None)} km/h",
        f"Rain (max next {config.HORIZON_HOURS}h): {format_value(obs.max_rain_mm if obs else None)} mm",
        f"Snow (max next {config.HORIZON_HOURS}h): {format_value(obs.max_snow_cm if obs else None)} cm",
        f"Elevation: {format_value(obs.elevation_m if obs else None)} m",
        f"Coordinates: {coords if coords is not None else NOT_AVAILABLE}",
        f"Basin (simplified): {basin_name(coords)}",
        f"Geological context: {config.REPORT_GEOLOGY_NOTE}",
        f"Ground: {inputs.ground.value}",
        f"Terrain: {inputs.terrain.value}",
        f"Severity: {inputs.severity.value}",
        f"Risk: {result.level.label if result else NOT_AVAILABLE}",
        f"Risk Score: {result.score if result else NOT_AVAILABLE}",
        f"Reasons: {reasons}",
    ]
    return "\n".join(lines)
