"""
Unit tests for the hazard scoring rules.

Covers each rule in isolation, the level thresholds and the two worked
end-to-end scenarios.
"""

import itertools

import pytest

from fieldrisk.models import Ground, RiskLevel, Severity, Terrain, UserInputs
from fieldrisk.scoring import (
    REASON_FREEZE_THAW,
    REASON_FREEZING,
    REASON_GROUND_UNSTABLE,
    REASON_GROUND_WET,
    REASON_RAIN,
    REASON_SNOW_ACCUMULATION,
    REASON_SNOW_HEAVY,
    REASON_TERRAIN_HILLY,
    REASON_WIND,
    classify_level,
    score,
)

from tests.helpers import make_observation


class TestAllClear:
    """Calm weather with default inputs scores nothing."""

    @pytest.mark.parametrize("rain", [None, 0, 0.0])
    @pytest.mark.parametrize("snow", [None, 0, 0.0])
    def test_no_hazards(self, rain, snow):
        obs = make_observation(temp=1.5, wind=40, rain=rain, snow=snow)
        result = score(obs, UserInputs())

        assert result.score == 0
        assert result.level == RiskLevel.SAFE
        assert result.reasons == ()

    def test_summary_without_hazards(self, calm_observation):
        result = score(calm_observation, UserInputs())
        assert result.summary == "No major hazards detected from the inputs."


class TestWindRule:
    def test_boundary_is_exclusive(self):
        assert score(make_observation(wind=40), UserInputs()).score == 0
        result = score(make_observation(wind=40.1), UserInputs())
        assert result.score == 2
        assert result.reasons == (REASON_WIND,)

    def test_monotonic_in_wind_speed(self):
        inputs = UserInputs(ground="wet", terrain="hilly", severity="medium")
        scores = [
            score(make_observation(temp=-3, wind=w, rain=0.5, snow=2), inputs).score
            for w in [0, 20, 40, 40.5, 41, 80, 200]
        ]
        assert scores == sorted(scores)


class TestRainRule:
    def test_boundary_is_inclusive(self):
        result = score(make_observation(rain=2), UserInputs())
        assert result.reasons == (REASON_RAIN,)
        assert result.score == 2

    def test_just_below_threshold(self):
        result = score(make_observation(rain=1.999), UserInputs())
        assert result.score == 0
        assert result.reasons == ()

    def test_missing_series_never_triggers(self):
        result = score(make_observation(temp=10, rain=None), UserInputs())
        assert REASON_RAIN not in result.reasons


class TestTemperatureRule:
    def test_freeze_thaw_with_light_rain(self):
        result = score(make_observation(temp=0.5, rain=0.1), UserInputs())
        assert result.reasons == (REASON_FREEZE_THAW,)
        assert result.score == 3

    def test_freeze_thaw_suppresses_freezing(self):
        result = score(make_observation(temp=-5, rain=0.5), UserInputs())
        assert REASON_FREEZE_THAW in result.reasons
        assert REASON_FREEZING not in result.reasons
        assert result.score == 3

    def test_freeze_thaw_upper_boundary(self):
        assert score(make_observation(temp=1, rain=0.2), UserInputs()).reasons == (REASON_FREEZE_THAW,)
        assert score(make_observation(temp=1.01, rain=0.2), UserInputs()).reasons == ()

    def test_freezing_without_rain(self):
        result = score(make_observation(temp=-2, rain=0), UserInputs())
        assert result.reasons == (REASON_FREEZING,)
        assert result.score == 2

    def test_freezing_boundary(self):
        assert score(make_observation(temp=0, rain=0), UserInputs()).reasons == (REASON_FREEZING,)
        assert score(make_observation(temp=0.5, rain=0), UserInputs()).reasons == ()

    @pytest.mark.parametrize("temp", [-10, -1, 0, 0.5, 1])
    def test_missing_rain_series_never_triggers_freeze_thaw(self, temp):
        result = score(make_observation(temp=temp, rain=None), UserInputs())
        assert REASON_FREEZE_THAW not in result.reasons

    def test_freezing_still_applies_without_rain_series(self):
        result = score(make_observation(temp=-1, rain=None), UserInputs())
        assert result.reasons == (REASON_FREEZING,)


class TestSnowRules:
    def test_one_centimetre_is_not_accumulation(self):
        assert score(make_observation(snow=1), UserInputs()).score == 0

    def test_accumulation_only(self):
        result = score(make_observation(snow=1.5), UserInputs())
        assert result.reasons == (REASON_SNOW_ACCUMULATION,)
        assert result.score == 2

    def test_five_centimetres_is_not_heavy(self):
        result = score(make_observation(snow=5), UserInputs())
        assert result.reasons == (REASON_SNOW_ACCUMULATION,)

    def test_heavy_snow_is_additive(self):
        result = score(make_observation(snow=6), UserInputs())
        assert result.reasons == (REASON_SNOW_ACCUMULATION, REASON_SNOW_HEAVY)
        assert result.score == 5

    def test_missing_series(self):
        assert score(make_observation(snow=None), UserInputs()).score == 0


class TestUserInputRules:
    GROUND_POINTS = {Ground.NORMAL: 0, Ground.WET: 2, Ground.UNSTABLE: 3}
    TERRAIN_POINTS = {Terrain.FLAT: 0, Terrain.HILLY: 2}
    SEVERITY_POINTS = {Severity.LOW: 0, Severity.MEDIUM: 1, Severity.HIGH: 2}

    @pytest.mark.parametrize(
        "ground,terrain,severity",
        list(itertools.product(Ground, Terrain, Severity)),
    )
    def test_input_table(self, calm_observation, ground, terrain, severity):
        result = score(calm_observation, UserInputs(ground, terrain, severity))

        expected = (
            self.GROUND_POINTS[ground]
            + self.TERRAIN_POINTS[terrain]
            + self.SEVERITY_POINTS[severity]
        )
        assert result.score == expected
        assert (REASON_GROUND_WET in result.reasons) == (ground == Ground.WET)
        assert (REASON_GROUND_UNSTABLE in result.reasons) == (ground == Ground.UNSTABLE)
        assert (REASON_TERRAIN_HILLY in result.reasons) == (terrain == Terrain.HILLY)

    def test_severity_emits_no_reason(self, calm_observation):
        result = score(calm_observation, UserInputs(severity="high"))
        assert result.score == 2
        assert result.reasons == ()
        assert result.level == RiskLevel.CAUTION

    def test_string_inputs_are_parsed(self, calm_observation):
        inputs = UserInputs(ground="Wet", terrain=" HILLY ", severity="medium")
        assert inputs.ground is Ground.WET
        assert inputs.terrain is Terrain.HILLY
        assert score(calm_observation, inputs).score == 5

    def test_unknown_input_rejected(self):
        with pytest.raises(ValueError, match="ground"):
            UserInputs(ground="muddy")


class TestLevels:
    @pytest.mark.parametrize(
        "total,level",
        [
            (0, RiskLevel.SAFE),
            (1, RiskLevel.SAFE),
            (2, RiskLevel.CAUTION),
            (3, RiskLevel.CAUTION),
            (4, RiskLevel.NOT_RECOMMENDED),
            (19, RiskLevel.NOT_RECOMMENDED),
        ],
    )
    def test_thresholds(self, total, level):
        assert classify_level(total) == level

    def test_not_recommended_label(self):
        assert RiskLevel.NOT_RECOMMENDED.label == "NOT RECOMMENDED"


class TestScenarios:
    def test_freezing_calm_day(self):
        obs = make_observation(temp=-2, wind=10, rain=0, snow=0)
        result = score(obs, UserInputs(ground="normal", terrain="flat", severity="low"))

        assert result.score == 2
        assert result.level == RiskLevel.CAUTION
        assert result.reasons == (REASON_FREEZING,)

    def test_winter_storm_on_unstable_hillside(self):
        obs = make_observation(temp=0.5, wind=45, rain=3, snow=6)
        result = score(obs, UserInputs(ground="unstable", terrain="hilly", severity="high"))

        assert result.score == 19
        assert result.level == RiskLevel.NOT_RECOMMENDED
        assert result.reasons == (
            REASON_WIND,
            REASON_RAIN,
            REASON_FREEZE_THAW,
            REASON_SNOW_ACCUMULATION,
            REASON_SNOW_HEAVY,
            REASON_GROUND_UNSTABLE,
            REASON_TERRAIN_HILLY,
        )
        assert result.summary == f"{REASON_WIND} + {REASON_RAIN}"

    def test_scoring_is_idempotent(self):
        obs = make_observation(temp=0.5, wind=45, rain=3, snow=6)
        inputs = UserInputs(ground="wet", terrain="hilly", severity="medium")

        assert score(obs, inputs) == score(obs, inputs)
