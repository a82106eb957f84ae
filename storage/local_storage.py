import json
from pathlib import Path
from typing import List, Optional
from datetime import datetime, date
from enum import Enum

import logfire

from models.recipe import Recipe
from models.grocery_list import GroceryList


class LocalStorage:
    """Local JSON file storage for recipes and grocery lists"""

    def __init__(self, data_directory: str = "storage/data"):
        self.data_directory = Path(data_directory)
        self.data_directory.mkdir(parents=True, exist_ok=True)

        # File paths
        self.recipes_file = self.data_directory / "recipes.json"
        self.grocery_lists_file = self.data_directory / "grocery_lists.json"

    def _json_serializer(self, obj):
        """Custom JSON serializer for datetime, date, enum and UUID objects"""
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        elif isinstance(obj, Enum):
            return obj.value
        elif hasattr(obj, 'hex'):  # UUID objects
            return str(obj)
        raise TypeError(f"Object of type {type(obj)} is not JSON serializable")

    def _load_json_file(self, file_path: Path, default_value=None):
        """Load JSON data from file, falling back to the default when missing or corrupt"""
        if not file_path.exists():
            return default_value if default_value is not None else []

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logfire.warn("storage_file_unreadable", path=str(file_path), error=str(e))
            return default_value if default_value is not None else []

    def _save_json_file(self, file_path: Path, data):
        """Save data to JSON file with proper formatting"""
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False, default=self._json_serializer)

    # Recipes Storage
    def save_recipes(self, recipes: List[Recipe]) -> None:
        """Save recipes to JSON file"""
        recipes_data = [recipe.model_dump(by_alias=True) for recipe in recipes]
        self._save_json_file(self.recipes_file, recipes_data)

    def load_recipes(self) -> List[Recipe]:
        """Load recipes from JSON file"""
        recipes_data = self._load_json_file(self.recipes_file, [])
        return [Recipe(**recipe_data) for recipe_data in recipes_data]

    def add_recipe(self, recipe: Recipe) -> Recipe:
        """Add a single recipe to storage"""
        recipes = self.load_recipes()
        recipes.append(recipe)
        self.save_recipes(recipes)
        return recipe

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """Get a specific recipe by ID"""
        for recipe in self.load_recipes():
            if recipe.id == recipe_id:
                return recipe
        return None

    def get_recipes_by_ids(self, recipe_ids: List[str]) -> List[Recipe]:
        """Get the stored recipes among the given IDs, in request order, skipping unknown IDs"""
        recipes_by_id = {recipe.id: recipe for recipe in self.load_recipes()}
        found = []
        for recipe_id in dict.fromkeys(recipe_ids):
            if recipe_id in recipes_by_id:
                found.append(recipes_by_id[recipe_id])
        return found

    def get_recipes_visible_to(self, user_id: str) -> List[Recipe]:
        """Recipes owned by the user plus every public recipe"""
        return [
            recipe for recipe in self.load_recipes()
            if recipe.author_id == user_id or recipe.visibility == "public"
        ]

    # Grocery Lists Storage
    def save_grocery_lists(self, grocery_lists: List[GroceryList]) -> None:
        """Save grocery lists to JSON file"""
        lists_data = [grocery_list.model_dump(by_alias=True) for grocery_list in grocery_lists]
        self._save_json_file(self.grocery_lists_file, lists_data)

    def load_grocery_lists(self) -> List[GroceryList]:
        """Load grocery lists from JSON file"""
        lists_data = self._load_json_file(self.grocery_lists_file, [])
        return [GroceryList(**list_data) for list_data in lists_data]

    def add_grocery_list(self, grocery_list: GroceryList) -> GroceryList:
        """Add a single grocery list to storage"""
        grocery_lists = self.load_grocery_lists()
        grocery_lists.append(grocery_list)
        self.save_grocery_lists(grocery_lists)
        return grocery_list

    def get_grocery_list(self, grocery_list_id: str, user_id: str) -> Optional[GroceryList]:
        """Get a grocery list by ID, only if it belongs to the user"""
        for grocery_list in self.load_grocery_lists():
            if grocery_list.id == grocery_list_id and grocery_list.user_id == user_id:
                return grocery_list
        return None

    def get_grocery_lists_for_user(self, user_id: str, limit: int = 10, offset: int = 0) -> List[GroceryList]:
        """Get a page of the user's grocery lists, most recently updated first"""
        user_lists = [gl for gl in self.load_grocery_lists() if gl.user_id == user_id]
        user_lists.sort(key=lambda gl: gl.updated_at, reverse=True)
        return user_lists[offset:offset + limit]

    def update_grocery_list(self, grocery_list: GroceryList) -> bool:
        """Replace a stored grocery list with the same ID"""
        grocery_lists = self.load_grocery_lists()
        for index, existing in enumerate(grocery_lists):
            if existing.id == grocery_list.id:
                grocery_lists[index] = grocery_list
                self.save_grocery_lists(grocery_lists)
                return True
        return False

    def delete_grocery_list(self, grocery_list_id: str) -> bool:
        """Delete a grocery list from storage"""
        grocery_lists = self.load_grocery_lists()
        original_count = len(grocery_lists)
        grocery_lists = [gl for gl in grocery_lists if gl.id != grocery_list_id]
        if len(grocery_lists) < original_count:
            self.save_grocery_lists(grocery_lists)
            return True
        return False

    # Utility methods
    def get_data_directory(self) -> Path:
        """Get the data directory path"""
        return self.data_directory

    def file_exists(self, filename: str) -> bool:
        """Check if a data file exists"""
        return (self.data_directory / filename).exists()
