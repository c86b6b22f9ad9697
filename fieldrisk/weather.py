"""Weather data fetching module using Open-Meteo API."""

import logging
import time

import requests

import config
from .errors import ProviderUnavailable
from .models import Coordinates

logger = logging.getLogger(__name__)


def fetch_forecast(
    coords: Coordinates,
    max_retries: int = config.FETCH_MAX_RETRIES,
    retry_delay: float = 1.0,
) -> dict:
    """
    Fetch current conditions and hourly precipitation/snowfall for a point.

    Args:
        coords: Location to fetch.
        max_retries: Number of attempts before giving up. Defaults to a
            single attempt; a failed refresh is retried by the user.
        retry_delay: Seconds to wait between attempts.

    Returns:
        The decoded Open-Meteo forecast payload.

    Raises:
        ProviderUnavailable: if every attempt failed.
    """
    params = {
        "latitude": coords.lat,
        "longitude": coords.lon,
        "current_weather": "true",
        "hourly": ",".join(config.HOURLY_PARAMS),
        "timezone": "auto",
    }

    last_error = None
    for attempt in range(max_retries):
        try:
            response = requests.get(
                config.OPEN_METEO_BASE_URL,
                params=params,
                timeout=config.REQUEST_TIMEOUT_S,
            )
            response.raise_for_status()
            return response.json()

        except (requests.RequestException, ValueError) as e:
            last_error = e
            logger.warning("Weather fetch failed for %s (attempt %d): %s", coords, attempt + 1, e)
            if attempt < max_retries - 1:
                time.sleep(retry_delay)

    raise ProviderUnavailable() from last_error
