"""Tests for the Director."""

from unittest.mock import Mock

import pytest

from src.domain.base.builder import BuildSpec, BuildStep
from src.domain.core.exceptions import (
    ConfigurationError,
    IncompleteProductError,
    UnknownBuildStepError,
    UnknownTypeError,
)
from src.domain.meal.builders import MealBuilder
from src.domain.meal.value_objects import MealType
from src.infrastructure.patterns.director import Director


@pytest.mark.unit
class TestDirector:
    """Test Director sequencing."""

    def test_construct_plays_every_step(self, director, meal_builder):
        spec = [
            BuildStep("starter", "Salad"),
            BuildStep("main", "Stir Fry"),
            BuildStep("dessert", "Pudding"),
            BuildStep("drink", "Shake"),
        ]

        assert director.construct(meal_builder, spec) is None
        meal = meal_builder.build()

        assert (meal.starter, meal.main, meal.dessert, meal.drink) == (
            "Salad",
            "Stir Fry",
            "Pudding",
            "Shake",
        )

    def test_steps_run_in_declared_order(self):
        builder = Mock()
        builder.supported_steps.return_value = ("a", "b", "c")

        Director().construct(builder, BuildSpec.of("c", "a", "b", "a"))

        assert [c.args for c in builder.apply_step.call_args_list] == [
            ("c", None),
            ("a", None),
            ("b", None),
            ("a", None),
        ]

    def test_unsupported_step_fails_before_any_step_runs(self, director, meal_builder):
        spec = [{"step": "main", "value": "Pasta"}, {"step": "garnish", "value": "Parsley"}]

        with pytest.raises(UnknownBuildStepError):
            director.construct(meal_builder, spec)

        assert meal_builder.missing_fields() == ["main", "drink"]

    def test_make_returns_product(self, director, vegan_builder):
        meal = director.make(vegan_builder, ["main", "drink"])

        assert meal.meal_type == MealType.VEGAN
        assert meal.courses() == ["Stir Fry", "Shake"]

    def test_make_resets_previous_draft(self, director, vegan_builder):
        vegan_builder.set_starter("Soup")

        meal = director.make(vegan_builder, ["main", "drink"])

        assert meal.starter is None

    def test_incomplete_spec(self, director, vegan_builder):
        with pytest.raises(IncompleteProductError):
            director.make(vegan_builder, ["starter", "dessert"])

    def test_make_recipe(self, director, classic_builder):
        meal = director.make_recipe(classic_builder, "full_course")
        assert meal.courses() == ["Chicken Wings", "Steak", "Ice Cream", "Cola"]

        light = director.make_recipe(classic_builder, "light")
        assert light.courses() == ["Steak", "Cola"]

    def test_construct_recipe(self, director, vegan_builder):
        director.construct_recipe(vegan_builder, "no_dessert")
        meal = vegan_builder.build()

        assert meal.dessert is None
        assert meal.starter == "Salad"

    def test_unknown_recipe(self, director, meal_builder):
        with pytest.raises(UnknownTypeError):
            director.construct_recipe(meal_builder, "banquet")

    def test_recipe_without_registry(self):
        with pytest.raises(ConfigurationError):
            Director().construct_recipe(MealBuilder(), "light")
