import pytest
from fastapi.testclient import TestClient

from app import app
from api.dependencies import get_storage
from models.recipe import Ingredient, Recipe
from storage.local_storage import LocalStorage


def make_recipe(recipe_id, title, ingredients, servings=None, author_id="user1", visibility="public"):
    """Build a Recipe from (name, amount, unit[, notes]) tuples"""
    return Recipe(
        id=recipe_id,
        title=title,
        ingredients=[
            Ingredient(name=line[0], amount=line[1], unit=line[2], notes=line[3] if len(line) > 3 else None)
            for line in ingredients
        ],
        servings=servings,
        author_id=author_id,
        visibility=visibility,
    )


@pytest.fixture
def pasta_salad():
    return make_recipe(
        "recipe1",
        "Pasta Salad",
        [("pasta", 2, "cup"), ("tomatoes", 3, ""), ("olive oil", 2, "tbsp")],
        servings=4,
    )


@pytest.fixture
def tomato_soup():
    return make_recipe(
        "recipe2",
        "Tomato Soup",
        [("tomatoes", 5, ""), ("onion", 1, ""), ("olive oil", 1, "tbsp")],
        servings=2,
    )


@pytest.fixture
def local_storage(tmp_path):
    return LocalStorage(str(tmp_path / "data"))


@pytest.fixture
def client(local_storage):
    app.dependency_overrides[get_storage] = lambda: local_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
