"""Place name lookup using the Open-Meteo geocoding API."""

import logging

import requests

import config
from .errors import LocationNotFound, ProviderUnavailable
from .models import Coordinates

logger = logging.getLogger(__name__)


def search_city(
    name: str,
    country: str = config.GEOCODING_COUNTRY,
    count: int = config.GEOCODING_RESULT_COUNT,
) -> Coordinates:
    """
    Resolve a place name to coordinates. The first result wins.

    Raises:
        ValueError: if the name is blank.
        LocationNotFound: if the geocoder has no match.
        ProviderUnavailable: if the lookup request itself failed.
    """
    query = (name or "").strip()
    if not query:
        raise ValueError(config.MSG_EMPTY_CITY)

    params = {"name": query, "count": count}
    if country:
        params["country"] = country

    try:
        response = requests.get(
            config.OPEN_METEO_GEOCODING_URL,
            params=params,
            timeout=config.REQUEST_TIMEOUT_S,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Geocoding failed for %r: %s", query, e)
        raise ProviderUnavailable("Something went wrong while searching the city.") from e

    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        logger.info("No geocoding results for %r", query)
        raise LocationNotFound()

    first = results[0]
    return Coordinates(lat=first["latitude"], lon=first["longitude"])
