"""
Tests for the exercise catalog and its workout type adaptations.
"""

import pytest

from models.workout import MuscleGroup
from services.exercise_catalog import EXERCISE_CATALOG, ExerciseTemplate
from services.workout_types import (
    HIIT_TIP_SUFFIX,
    STRETCH_TIPS,
    adapt_catalog,
)


@pytest.mark.unit
class TestExerciseCatalog:
    """Tests for the built-in catalog."""

    def test_covers_every_muscle_group(self):
        assert set(EXERCISE_CATALOG) == {g.value for g in MuscleGroup}

    def test_each_group_has_four_exercises(self):
        for group, templates in EXERCISE_CATALOG.items():
            assert len(templates) == 4, group

    def test_first_chest_exercise(self):
        first = EXERCISE_CATALOG["chest"][0]
        assert first.name == "Push-ups"
        assert first.reps == 12
        assert first.rep_type == "reps"

    def test_time_based_exercises_keep_their_rep_type(self):
        plank = EXERCISE_CATALOG["core"][0]
        assert plank.name == "Plank"
        assert plank.reps == 45
        assert plank.rep_type == "seconds"

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            EXERCISE_CATALOG["chest"] = ()


@pytest.mark.unit
class TestAdaptCatalog:
    """Tests for adapt_catalog()."""

    @pytest.mark.parametrize("workout_type", ["lifting", "circuit", "crossfit", "calisthenics", "combination", "yoga"])
    def test_other_types_use_catalog_unchanged(self, workout_type):
        assert adapt_catalog(EXERCISE_CATALOG, workout_type) is EXERCISE_CATALOG

    def test_hiit_converts_to_timed_intervals(self):
        hiit = adapt_catalog(EXERCISE_CATALOG, "hiit")

        for group, templates in hiit.items():
            originals = EXERCISE_CATALOG[group]
            assert [t.name for t in templates] == [t.name for t in originals]
            for template, original in zip(templates, originals):
                assert template.reps == 30
                assert template.rep_type == "seconds"
                assert template.tip == original.tip + HIIT_TIP_SUFFIX

    def test_hiit_leaves_base_catalog_untouched(self):
        adapt_catalog(EXERCISE_CATALOG, "hiit")
        assert EXERCISE_CATALOG["chest"][0].reps == 12
        assert EXERCISE_CATALOG["chest"][0].rep_type == "reps"

    def test_stretching_replaces_exercises(self):
        stretching = adapt_catalog(EXERCISE_CATALOG, "stretching")

        assert set(stretching) == set(EXERCISE_CATALOG)
        assert stretching["core"] == (
            ExerciseTemplate("Core Stretch 1", 30, STRETCH_TIPS[0], "seconds hold"),
            ExerciseTemplate("Core Stretch 2", 30, STRETCH_TIPS[1], "seconds hold"),
        )

    def test_stretching_names_fullbody_by_key(self):
        stretching = adapt_catalog(EXERCISE_CATALOG, "stretching")
        assert stretching["fullbody"][0].name == "Fullbody Stretch 1"
