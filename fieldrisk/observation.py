"""Normalize Open-Meteo forecast payloads into Observation records."""

import logging
import math
from numbers import Real
from typing import Optional

import numpy as np

import config
from .errors import ProviderUnavailable
from .models import Observation

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    # bool is an int subclass; NaN cannot be compared against thresholds
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return not math.isnan(value)
    except OverflowError:
        # JSON integers too large for a float
        return False


def horizon_max(series, hours: int = config.HORIZON_HOURS) -> Optional[float]:
    """
    Maximum of the first `hours` numeric entries of an hourly series.

    Args:
        series: Hourly values in chronological order starting now.
        hours: Number of leading buckets that make up the horizon.

    Returns:
        None if the series is missing or not a list, 0 if the horizon holds
        no numeric entries, otherwise the maximum value.
    """
    if not isinstance(series, (list, tuple)):
        return None

    values = [v for v in series[:hours] if _is_number(v)]
    if not values:
        return 0

    return float(np.max(values))


def _current_block(payload: dict) -> dict:
    current = payload.get("current_weather")
    if current is None:
        current = payload.get("current")
    if not isinstance(current, dict):
        raise ProviderUnavailable()
    return current


def assemble(payload) -> Observation:
    """
    Build an Observation from a raw forecast payload.

    The payload is shaped like the Open-Meteo forecast response:
    {"current_weather": {"temperature", "windspeed", "time"},
     "hourly": {"precipitation": [...], "snowfall": [...]},
     "elevation": float}

    Raises:
        ProviderUnavailable: if the current conditions are missing or not
            numeric.
    """
    if not isinstance(payload, dict):
        logger.warning("Forecast payload is %s, expected a JSON object", type(payload).__name__)
        raise ProviderUnavailable()

    current = _current_block(payload)
    temperature = current.get("temperature")
    wind_speed = current.get("windspeed")
    if not (_is_number(temperature) and _is_number(wind_speed)):
        logger.warning(
            "Malformed current conditions: temperature=%r windspeed=%r",
            temperature,
            wind_speed,
        )
        raise ProviderUnavailable()

    hourly = payload.get("hourly")
    if not isinstance(hourly, dict):
        hourly = {}

    elevation = payload.get("elevation")

    observation = Observation(
        temperature_c=float(temperature),
        wind_speed_kph=float(wind_speed),
        max_rain_mm=horizon_max(hourly.get("precipitation")),
        max_snow_cm=horizon_max(hourly.get("snowfall")),
        elevation_m=float(elevation) if _is_number(elevation) else None,
        observed_at=current.get("time"),
    )
    logger.debug("Assembled %s", observation)
    return observation
