"""Screening session: owns the current observation and recomputes risk."""

import logging
from datetime import datetime
from typing import Callable, Optional, Set

import config
from .errors import FieldRiskError, ProviderUnavailable
from .geocoding import search_city
from .models import Coordinates, Ground, Observation, RiskResult, Severity, Terrain, UserInputs
from .observation import assemble
from .scoring import score
from .weather import fetch_forecast

logger = logging.getLogger(__name__)


class ScreeningSession:
    """
    Holds the state behind one screening: location, latest observation,
    user inputs and the refresh/error flags.

    Refreshes are tagged with increasing sequence numbers. A response is
    applied only if it is newer than the last settled refresh, so a slow
    response can never overwrite a newer one.
    """

    def __init__(
        self,
        location_name: str = config.DEFAULT_LOCATION["name"],
        coords: Optional[Coordinates] = None,
        inputs: Optional[UserInputs] = None,
        fetcher: Callable[[Coordinates], dict] = fetch_forecast,
        geocoder: Callable[[str], Coordinates] = search_city,
    ):
        if coords is None:
            coords = Coordinates(config.DEFAULT_LOCATION["lat"], config.DEFAULT_LOCATION["lon"])

        self.location_name = location_name
        self.coords: Optional[Coordinates] = coords
        self.inputs = inputs if inputs is not None else UserInputs()
        self.observation: Optional[Observation] = None
        self.error: Optional[str] = None
        self.last_updated: Optional[datetime] = None

        self._fetch = fetcher
        self._geocode = geocoder
        self._issued_seq = 0
        self._settled_seq = 0
        self._pending: Set[int] = set()

    # --- Derived state ---------------------------------------------------

    @property
    def risk(self) -> Optional[RiskResult]:
        """Fresh RiskResult, or None until the first observation arrives."""
        if self.observation is None:
            return None
        return score(self.observation, self.inputs)

    @property
    def loading(self) -> bool:
        return bool(self._pending)

    @property
    def is_stale(self) -> bool:
        """True when the shown observation did not come from the latest refresh."""
        return self.error is not None and self.observation is not None

    # --- Refresh lifecycle -----------------------------------------------

    def begin_refresh(self) -> int:
        self._issued_seq += 1
        seq = self._issued_seq
        self._pending.add(seq)
        self.error = None
        logger.debug("Refresh %d started for %s", seq, self.coords)
        return seq

    def _settle(self, seq: int) -> bool:
        """Mark `seq` settled; returns False if a newer refresh already settled."""
        if seq <= self._settled_seq:
            self._pending.discard(seq)
            logger.info("Discarding stale refresh %d (latest settled %d)", seq, self._settled_seq)
            return False
        self._settled_seq = seq
        self._pending = {s for s in self._pending if s > seq}
        return True

    def complete_refresh(self, seq: int, payload) -> bool:
        """Apply a provider payload. Returns True if it became the current observation."""
        try:
            observation = assemble(payload)
        except ProviderUnavailable as e:
            return self.fail_refresh(seq, e)

        if not self._settle(seq):
            return False

        self.observation = observation
        self.last_updated = datetime.now()
        return True

    def fail_refresh(self, seq: int, error: Exception) -> bool:
        """Record a failed refresh; the previous observation is kept."""
        if not self._settle(seq):
            return False

        self.error = error.message if isinstance(error, FieldRiskError) else config.MSG_WEATHER_FAILED
        logger.warning("Refresh %d failed: %s", seq, error)
        return True

    def refresh(self) -> Optional[RiskResult]:
        """Fetch, assemble and rescore for the current coordinates."""
        if self.coords is None:
            return self.risk

        seq = self.begin_refresh()
        try:
            payload = self._fetch(self.coords)
            self.complete_refresh(seq, payload)
        except Exception as e:
            # every failure settles the refresh so loading never sticks
            self.fail_refresh(seq, e)
        return self.risk

    # --- Location ----------------------------------------------------------

    def set_location(self, coords: Coordinates, name: Optional[str] = None) -> Optional[RiskResult]:
        self.coords = coords
        if name:
            self.location_name = name
        return self.refresh()

    def search(self, city: str) -> Optional[RiskResult]:
        """Geocode a place name and refresh there. No refresh on lookup failure."""
        try:
            coords = self._geocode(city)
        except FieldRiskError as e:
            self.error = e.message
            return None
        except ValueError as e:
            self.error = str(e)
            return None

        return self.set_location(coords, name=city.strip())

    # --- User inputs -------------------------------------------------------

    def update_inputs(self, ground=None, terrain=None, severity=None) -> Optional[RiskResult]:
        """Change any of the declared site conditions and rescore."""
        if ground is not None:
            self.inputs.ground = Ground.parse(ground)
        if terrain is not None:
            self.inputs.terrain = Terrain.parse(terrain)
        if severity is not None:
            self.inputs.severity = Severity.parse(severity)
        return self.risk

    def reset_inputs(self) -> Optional[RiskResult]:
        self.inputs.reset()
        return self.risk
