"""
Tests for intensity scaling.
"""

import pytest

from services.intensity import IntensityScale, scale_intensity


@pytest.mark.unit
class TestScaleIntensity:
    """Tests for scale_intensity()."""

    @pytest.mark.parametrize(
        "intensity,expected",
        [
            (1, IntensityScale(sets=3, rest_seconds=80, exercises_per_group=3, max_total_exercises=4)),
            (2, IntensityScale(sets=4, rest_seconds=70, exercises_per_group=2, max_total_exercises=5)),
            (3, IntensityScale(sets=4, rest_seconds=60, exercises_per_group=2, max_total_exercises=6)),
            (4, IntensityScale(sets=5, rest_seconds=50, exercises_per_group=2, max_total_exercises=6)),
            (5, IntensityScale(sets=5, rest_seconds=45, exercises_per_group=2, max_total_exercises=6)),
        ],
    )
    def test_scale_for_each_level(self, intensity, expected):
        assert scale_intensity(intensity) == expected

    def test_sets_never_decrease(self):
        sets = [scale_intensity(i).sets for i in range(1, 6)]
        assert sets == sorted(sets)

    def test_rest_never_increases(self):
        rest = [scale_intensity(i).rest_seconds for i in range(1, 6)]
        assert rest == sorted(rest, reverse=True)

    def test_rest_has_floor(self):
        assert scale_intensity(5).rest_seconds == 45

    def test_cap_stays_within_bounds(self):
        for i in range(1, 6):
            assert 4 <= scale_intensity(i).max_total_exercises <= 6

    def test_scale_is_immutable(self):
        scale = scale_intensity(3)
        with pytest.raises(AttributeError):
            scale.sets = 10
