"""
Grocery List Generation
Turns a set of recipes into a consolidated, categorized shopping list.

Pipeline:
1. Scale each recipe's ingredients by its serving adjustment
2. Merge lines sharing (name, unit), case-insensitive and trimmed
3. Categorize each merged item and sort by aisle display order, then name
4. Wrap the items in a GroceryList record with a synthesized title
"""

from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models.grocery_list import GroceryCategory, GroceryItem, GroceryList
from models.recipe import Ingredient, Recipe, Visibility
from services.ingredient_categorizer import categorize_ingredient


CATEGORY_ORDER: List[GroceryCategory] = [
    GroceryCategory.produce,
    GroceryCategory.dairy,
    GroceryCategory.meat,
    GroceryCategory.seafood,
    GroceryCategory.pantry,
    GroceryCategory.spices,
    GroceryCategory.condiments,
    GroceryCategory.frozen,
    GroceryCategory.bakery,
    GroceryCategory.beverages,
    GroceryCategory.other,
]

_CATEGORY_RANK: Dict[str, int] = {category.value: rank for rank, category in enumerate(CATEGORY_ORDER)}

NOTES_SEPARATOR = "; "


def _scale_factor(recipe: Recipe, serving_adjustments: Mapping[str, float]) -> float:
    """Recipes without servings count as one serving."""
    if recipe.id not in serving_adjustments:
        return 1.0
    return serving_adjustments[recipe.id] / (recipe.servings or 1)


def _aggregation_key(ingredient: Ingredient) -> Tuple[str, str]:
    return ingredient.name.lower().strip(), (ingredient.unit or "").lower().strip()


def _sort_key(item: GroceryItem) -> Tuple[int, str]:
    category = item.category.value if isinstance(item.category, GroceryCategory) else item.category
    return _CATEGORY_RANK.get(category, len(CATEGORY_ORDER)), item.name.lower()


def generate_grocery_list(
    recipes: Iterable[Recipe],
    serving_adjustments: Optional[Mapping[str, float]] = None,
) -> List[GroceryItem]:
    """
    Generate a consolidated grocery list from multiple recipes.

    Args:
        recipes: Recipes to shop for, already fetched and authorized
        serving_adjustments: recipe id -> target servings

    Returns:
        Fresh GroceryItems sorted by category display order, then name
    """
    serving_adjustments = serving_adjustments or {}
    merged: Dict[Tuple[str, str], GroceryItem] = {}

    for recipe in recipes:
        scale = _scale_factor(recipe, serving_adjustments)

        for ingredient in recipe.ingredients:
            key = _aggregation_key(ingredient)
            amount = ingredient.amount * scale
            notes = (ingredient.notes or "").strip()

            existing = merged.get(key)
            if existing is None:
                merged[key] = GroceryItem(
                    name=ingredient.name,
                    amount=amount,
                    unit=ingredient.unit or "",
                    category=categorize_ingredient(ingredient.name),
                    notes=notes,
                    recipe_ids=[recipe.id],
                )
                continue

            existing.amount += amount
            if notes:
                existing.notes = NOTES_SEPARATOR.join(filter(None, [existing.notes, notes]))
            if recipe.id not in existing.recipe_ids:
                existing.recipe_ids.append(recipe.id)

    return sorted(merged.values(), key=_sort_key)


def generate_grocery_list_title(recipes: List[Recipe]) -> str:
    """Generate a default title for a grocery list based on the recipes used"""
    if not recipes:
        return "Grocery List"

    if len(recipes) == 1:
        return f"Grocery List for {recipes[0].title}"

    if len(recipes) <= 3:
        titles = ", ".join(recipe.title for recipe in recipes)
        return f"Grocery List for {titles}"

    return f"Grocery List for {len(recipes)} Recipes"


def find_inaccessible_recipes(recipes: Iterable[Recipe], user_id: str) -> List[Recipe]:
    """Recipes the user neither owns nor can see publicly"""
    return [
        recipe for recipe in recipes
        if recipe.author_id != user_id and recipe.visibility != Visibility.public
    ]


def create_grocery_list(
    recipes: List[Recipe],
    *,
    user_id: str,
    recipe_ids: List[str],
    serving_adjustments: Optional[Mapping[str, float]] = None,
    title: Optional[str] = None,
) -> GroceryList:
    """
    Build a GroceryList record ready to be persisted.

    Args:
        recipes: Recipes to shop for
        user_id: Owner of the new list
        recipe_ids: Recipe IDs exactly as requested, stored as generatedFrom
        serving_adjustments: recipe id -> target servings
        title: Explicit title; synthesized from the recipes when empty

    Returns:
        New GroceryList with fresh id and timestamps
    """
    items = generate_grocery_list(recipes, serving_adjustments)
    now = datetime.now()

    return GroceryList(
        title=title or generate_grocery_list_title(recipes),
        items=items,
        user_id=user_id,
        generated_from=list(recipe_ids),
        created_at=now,
        updated_at=now,
    )
