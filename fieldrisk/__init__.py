"""Field Risk Screening - Source package."""

from .errors import FieldRiskError, LocationNotFound, ProviderUnavailable
from .models import Coordinates, Ground, Observation, RiskLevel, RiskResult, Severity, Terrain, UserInputs
from .observation import assemble
from .scoring import classify_level, score
from .report import generate_report
from .session import ScreeningSession

__all__ = [
    "FieldRiskError",
    "LocationNotFound",
    "ProviderUnavailable",
    "Coordinates",
    "Ground",
    "Observation",
    "RiskLevel",
    "RiskResult",
    "Severity",
    "Terrain",
    "UserInputs",
    "assemble",
    "classify_level",
    "score",
    "generate_report",
    "ScreeningSession",
]
