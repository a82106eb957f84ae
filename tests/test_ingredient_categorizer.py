import pytest

from models.grocery_list import GroceryCategory
from services.ingredient_categorizer import INGREDIENT_CATEGORIES, categorize_ingredient


class TestCategorizeIngredient:

    @pytest.mark.parametrize(
        "name,expected",
        (
            ("tomato", GroceryCategory.produce),
            ("chicken breast", GroceryCategory.meat),
            ("salmon", GroceryCategory.seafood),
            ("milk", GroceryCategory.dairy),
            ("flour", GroceryCategory.pantry),
            ("salt", GroceryCategory.spices),
            ("ketchup", GroceryCategory.condiments),
            ("frozen pizza", GroceryCategory.frozen),
            ("bread", GroceryCategory.bakery),
            ("water", GroceryCategory.beverages),
        ),
    )
    def test_common_ingredients(self, name, expected):
        assert categorize_ingredient(name) == expected

    @pytest.mark.parametrize(
        "name",
        ("tomato", "Chicken Breast", "whole milk", "olive oil", "xyzzy-nonexistent-ingredient", "Ice Cream"),
    )
    def test_case_insensitive(self, name):
        """Upper, lower and mixed case resolve identically"""
        assert categorize_ingredient(name) == categorize_ingredient(name.upper()) == categorize_ingredient(name.lower())

    def test_upper_case_names(self):
        assert categorize_ingredient("TOMATO") == GroceryCategory.produce
        assert categorize_ingredient("MILK") == GroceryCategory.dairy

    def test_surrounding_whitespace_ignored(self):
        assert categorize_ingredient("  salmon  ") == GroceryCategory.seafood

    @pytest.mark.parametrize(
        "name,expected",
        (
            ("cherry tomatoes", GroceryCategory.produce),
            ("ground chicken", GroceryCategory.meat),
            ("whole milk", GroceryCategory.dairy),
            ("extra virgin olive oil", GroceryCategory.condiments),
        ),
    )
    def test_partial_matches(self, name, expected):
        """A known key inside a longer name matches"""
        assert categorize_ingredient(name) == expected

    def test_name_inside_key_matches(self):
        """Containment works in the other direction too"""
        assert categorize_ingredient("cauli") == GroceryCategory.produce

    def test_unknown_defaults_to_other(self):
        assert categorize_ingredient("xyzzy-nonexistent-ingredient") == GroceryCategory.other
        assert categorize_ingredient("mysterious ingredient") == GroceryCategory.other

    def test_empty_name_is_other(self):
        assert categorize_ingredient("") == GroceryCategory.other
        assert categorize_ingredient("   ") == GroceryCategory.other

    def test_exact_match_beats_earlier_partial_key(self):
        """'ice cream' is frozen even though 'cream' (dairy) is declared first"""
        assert categorize_ingredient("ice cream") == GroceryCategory.frozen
        assert categorize_ingredient("vanilla ice cream") == GroceryCategory.dairy

    def test_first_declared_key_wins(self):
        """'chicken' is declared before 'broth'"""
        keys = list(INGREDIENT_CATEGORIES)
        assert keys.index("chicken") < keys.index("broth")
        assert categorize_ingredient("chicken broth") == GroceryCategory.meat

    def test_table_only_uses_known_categories(self):
        assert set(INGREDIENT_CATEGORIES.values()) <= set(GroceryCategory)
