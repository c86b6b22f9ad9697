"""Hazard scoring rules for field entry screening."""

import logging
from typing import List, Optional, Tuple

import config
from .models import Ground, Observation, RiskLevel, RiskResult, Severity, Terrain, UserInputs

logger = logging.getLogger(__name__)

# Reason strings, in rule evaluation order
REASON_WIND = "High wind (> 40 km/h)"
REASON_RAIN = "Moderate/Heavy precipitation (reduced traction/visibility)"
REASON_FREEZE_THAW = "Freeze–thaw hazard (precipitation near 0°C)"
REASON_FREEZING = "Freezing temperature (ice risk)"
REASON_SNOW_ACCUMULATION = "Snow accumulation (> 1 cm)"
REASON_SNOW_HEAVY = "Heavy snowfall (> 5 cm)"
REASON_GROUND_WET = "Wet surface (slip risk)"
REASON_GROUND_UNSTABLE = "Unstable / soft ground (access risk)"
REASON_TERRAIN_HILLY = "Hilly terrain (slip / access difficulty)"

# A rule outcome is (points, reason) or None when the rule did not fire
Hit = Optional[Tuple[int, str]]


def _wind_rule(obs: Observation) -> Hit:
    if obs.wind_speed_kph > config.WIND_HIGH_KPH:
        return config.POINTS_WIND, REASON_WIND
    return None


def _rain_rule(obs: Observation) -> Hit:
    if obs.max_rain_mm is not None and obs.max_rain_mm >= config.RAIN_MODERATE_MM:
        return config.POINTS_RAIN, REASON_RAIN
    return None


def _temperature_rule(obs: Observation) -> Hit:
    """Freeze-thaw takes priority over plain freezing; at most one fires."""
    rain = obs.max_rain_mm
    if obs.temperature_c <= config.FREEZE_THAW_TEMP_C and rain is not None and rain > 0:
        return config.POINTS_FREEZE_THAW, REASON_FREEZE_THAW
    if obs.temperature_c <= config.FREEZING_TEMP_C:
        return config.POINTS_FREEZING, REASON_FREEZING
    return None


def _snow_accumulation_rule(obs: Observation) -> Hit:
    if obs.max_snow_cm is not None and obs.max_snow_cm > config.SNOW_ACCUMULATION_CM:
        return config.POINTS_SNOW_ACCUMULATION, REASON_SNOW_ACCUMULATION
    return None


def _heavy_snow_rule(obs: Observation) -> Hit:
    if obs.max_snow_cm is not None and obs.max_snow_cm > config.SNOW_HEAVY_CM:
        return config.POINTS_SNOW_HEAVY, REASON_SNOW_HEAVY
    return None


def _ground_rule(inputs: UserInputs) -> Hit:
    if inputs.ground == Ground.WET:
        return config.POINTS_GROUND_WET, REASON_GROUND_WET
    if inputs.ground == Ground.UNSTABLE:
        return config.POINTS_GROUND_UNSTABLE, REASON_GROUND_UNSTABLE
    return None


def _terrain_rule(inputs: UserInputs) -> Hit:
    if inputs.terrain == Terrain.HILLY:
        return config.POINTS_TERRAIN_HILLY, REASON_TERRAIN_HILLY
    return None


def _severity_surcharge(severity: Severity) -> int:
    return config.SEVERITY_SURCHARGE[Severity.parse(severity).value]


def classify_level(total: int) -> RiskLevel:
    """Map a summed score onto the three risk levels."""
    if total >= config.LEVEL_NOT_RECOMMENDED_MIN:
        return RiskLevel.NOT_RECOMMENDED
    if total >= config.LEVEL_CAUTION_MIN:
        return RiskLevel.CAUTION
    return RiskLevel.SAFE


def score(observation: Observation, inputs: UserInputs) -> RiskResult:
    """
    Score field entry risk from weather and declared site conditions.

    Rules are evaluated in a fixed order and each contributes at most once,
    so `reasons` follows evaluation order rather than severity. The severity
    surcharge adds points without a reason.

    Args:
        observation: Current weather snapshot.
        inputs: Ground, terrain and severity declared by the user.

    Returns:
        RiskResult with the total score, its level and the triggered reasons.
    """
    hits: List[Hit] = [
        _wind_rule(observation),
        _rain_rule(observation),
        _temperature_rule(observation),
        _snow_accumulation_rule(observation),
        _heavy_snow_rule(observation),
        _ground_rule(inputs),
        _terrain_rule(inputs),
    ]

    total = 0
    reasons = []
    for hit in hits:
        if hit is None:
            continue
        points, reason = hit
        total += points
        reasons.append(reason)

    total += _severity_surcharge(inputs.severity)

    result = RiskResult(score=total, level=classify_level(total), reasons=tuple(reasons))
    logger.debug("Scored %d (%s): %s", result.score, result.level.name, ", ".join(reasons) or "no hazards")
    return result
