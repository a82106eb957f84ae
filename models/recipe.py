from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from .base import BaseEntity


class Visibility(str, Enum):
    """Who can read a recipe"""
    private = "private"
    public = "public"


class Ingredient(BaseEntity):
    """A named quantity used within a recipe"""
    name: str = Field(..., description="Ingredient name as written in the recipe")
    amount: float = Field(..., description="Quantity for the recipe's default servings")
    unit: str = Field(default="", description="Unit of measure, empty for countable items")
    notes: Optional[str] = Field(None, description="Free-text preparation notes")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440010",
                "name": "tomatoes",
                "amount": 3,
                "unit": "",
                "notes": "ripe and red"
            }
        }
    }


class Recipe(BaseEntity):
    """Recipe model as stored and passed to grocery list generation"""
    title: str = Field(..., description="Recipe title")
    description: Optional[str] = Field(None, description="Short description")
    ingredients: List[Ingredient] = Field(default_factory=list, description="Ingredient lines")
    servings: Optional[int] = Field(None, description="Default number of servings")
    author_id: str = Field(..., description="User who owns the recipe", alias="authorId")
    visibility: Visibility = Field(Visibility.private, description="private or public")
    created_at: datetime = Field(default_factory=datetime.now, alias="createdAt")
    updated_at: datetime = Field(default_factory=datetime.now, alias="updatedAt")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "id": "recipe1",
                "title": "Pasta Salad",
                "description": "A delicious pasta salad",
                "ingredients": [
                    {"name": "pasta", "amount": 2, "unit": "cup"},
                    {"name": "tomatoes", "amount": 3, "unit": ""}
                ],
                "servings": 4,
                "authorId": "user1",
                "visibility": "public"
            }
        }
    }


class RecipeCreate(BaseModel):
    """Model for creating a new recipe (author comes from the request identity)"""
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    ingredients: List[Ingredient] = Field(default_factory=list)
    servings: Optional[int] = Field(None, gt=0)
    visibility: Visibility = Visibility.private

    model_config = {
        "use_enum_values": True,
        "populate_by_name": True
    }
