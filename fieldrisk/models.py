"""Data types shared by the observation assembler, scorer and report."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import config


class _Choice(str, Enum):
    """String-valued enum that parses user input case-insensitively."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid {cls.__name__.lower()} '{value}' (expected one of: {allowed})") from None


class Ground(_Choice):
    NORMAL = "normal"
    WET = "wet"
    UNSTABLE = "unstable"


class Terrain(_Choice):
    FLAT = "flat"
    HILLY = "hilly"


class Severity(_Choice):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskLevel(Enum):
    SAFE = "SAFE"
    CAUTION = "CAUTION"
    NOT_RECOMMENDED = "NOT RECOMMENDED"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float

    def __str__(self) -> str:
        return f"{self.lat}, {self.lon}"


@dataclass(frozen=True)
class Observation:
    """
    Normalized weather snapshot taken from one provider response.

    Attributes:
        temperature_c: Instantaneous air temperature in °C.
        wind_speed_kph: Instantaneous wind speed in km/h.
        max_rain_mm: Max hourly precipitation over the forecast horizon.
            None only when the provider omitted the precipitation series.
        max_snow_cm: Max hourly snowfall over the forecast horizon, same
            None policy as max_rain_mm.
        elevation_m: Grid-cell elevation reported by the provider, if any.
        observed_at: Provider timestamp of the current conditions, if any.
    """

    temperature_c: float
    wind_speed_kph: float
    max_rain_mm: Optional[float]
    max_snow_cm: Optional[float]
    elevation_m: Optional[float] = None
    observed_at: Optional[str] = None


@dataclass
class UserInputs:
    """Site conditions declared by the user; persists across refreshes."""

    ground: Ground = Ground.NORMAL
    terrain: Terrain = Terrain.FLAT
    severity: Severity = Severity.LOW

    def __post_init__(self):
        self.ground = Ground.parse(self.ground)
        self.terrain = Terrain.parse(self.terrain)
        self.severity = Severity.parse(self.severity)

    def reset(self) -> None:
        self.ground = Ground.NORMAL
        self.terrain = Terrain.FLAT
        self.severity = Severity.LOW


@dataclass(frozen=True)
class RiskResult:
    score: int
    level: RiskLevel
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def summary(self) -> str:
        """Top two reasons, or a fixed message when nothing fired."""
        if not self.reasons:
            return config.MSG_NO_HAZARDS
        return " + ".join(self.reasons[:2])
