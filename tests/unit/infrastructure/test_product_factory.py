"""Tests for the tag-based product factory."""

from unittest.mock import Mock

import pytest

from src.domain.burger.aggregate import Burger
from src.domain.burger.menu import create_vegan_burger
from src.domain.burger.value_objects import BurgerType
from src.domain.core.exceptions import (
    ConfigurationError,
    DuplicateRegistrationError,
    UnknownTypeError,
)
from src.infrastructure.registry.product_factory import ProductFactory


@pytest.mark.unit
class TestProductFactory:
    """Test product factory functionality."""

    def test_create_known_then_unknown(self, burger_factory):
        burger = burger_factory.create("VEGAN")

        assert isinstance(burger, Burger)
        assert burger.burger_type == BurgerType.VEGAN

        with pytest.raises(UnknownTypeError) as exc:
            burger_factory.create("UNKNOWN")

        assert exc.value.tag == "UNKNOWN"
        assert exc.value.available == ["CHEESE", "DELUXE", "VEGAN"]

    @pytest.mark.parametrize("tag", list(BurgerType))
    def test_every_registered_tag_creates_its_type(self, burger_factory, tag):
        burger = burger_factory.create(tag)

        assert isinstance(burger, burger_factory.product_type_for(tag))
        assert burger.burger_type == tag

    @pytest.mark.parametrize("tag", ["vegan", " Vegan ", BurgerType.VEGAN])
    def test_tags_are_normalized(self, burger_factory, tag):
        assert burger_factory.create(tag).burger_type == BurgerType.VEGAN

    @pytest.mark.parametrize("tag", ["", "VEGGIE", "unknown"])
    def test_unregistered_tags_always_fail(self, burger_factory, tag):
        with pytest.raises(UnknownTypeError):
            burger_factory.create(tag)

    def test_each_create_returns_new_product(self, burger_factory):
        first = burger_factory.create("CHEESE")
        second = burger_factory.create("CHEESE")

        assert first == second
        assert first is not second
        assert first.toppings is not second.toppings

    def test_overrides_are_passed_to_constructor(self, burger_factory):
        burger = burger_factory.create("CHEESE", toppings=["onion"])
        assert burger.toppings == ["onion"]

    def test_duplicate_registration_rejected(self, burger_factory):
        with pytest.raises(DuplicateRegistrationError):
            burger_factory.register("vegan", create_vegan_burger, Burger)

    def test_new_tag_needs_only_a_registration(self, burger_factory):
        constructor = Mock(return_value=create_vegan_burger(name="Mushroom Burger"))

        burger_factory.register("MUSHROOM", constructor, Burger)
        burger = burger_factory.create("mushroom", bun="rye")

        assert burger.name == "Mushroom Burger"
        constructor.assert_called_once_with(bun="rye")
        assert burger_factory.create("VEGAN").name == "Vegan Burger"

    def test_constructor_returning_wrong_type(self):
        factory = ProductFactory(name="test")
        factory.register("BROKEN", Mock(return_value="not a burger"), Burger)

        with pytest.raises(ConfigurationError, match="expected Burger"):
            factory.create("BROKEN")

    def test_non_callable_constructor_rejected(self):
        with pytest.raises(ConfigurationError):
            ProductFactory().register("X", "not callable", Burger)

    def test_unregister_and_clear(self, burger_factory):
        assert burger_factory.unregister("DELUXE")
        assert not burger_factory.unregister("DELUXE")
        assert burger_factory.registered_tags() == ["VEGAN", "CHEESE"]

        burger_factory.clear_registrations()
        assert len(burger_factory) == 0
        assert not burger_factory.is_registered("VEGAN")

    @pytest.mark.parametrize("tag", [42, None, 3.5, ("VEGAN",)])
    def test_non_string_tag_is_unknown(self, burger_factory, tag):
        with pytest.raises(UnknownTypeError) as exc:
            burger_factory.create(tag)

        assert exc.value.tag == tag
        assert exc.value.available == ["CHEESE", "DELUXE", "VEGAN"]
        assert not burger_factory.is_registered(tag)
        assert tag not in burger_factory
        assert not burger_factory.unregister(tag)
        assert len(burger_factory) == 3

    def test_non_string_tag_cannot_be_registered(self):
        with pytest.raises(TypeError):
            ProductFactory().register(42, Burger, Burger)
