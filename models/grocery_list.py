from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, PositiveFloat
from .base import BaseEntity


class GroceryCategory(str, Enum):
    """Grocery store aisle groupings, declared in display order"""
    produce = "produce"
    dairy = "dairy"
    meat = "meat"
    seafood = "seafood"
    pantry = "pantry"
    spices = "spices"
    condiments = "condiments"
    frozen = "frozen"
    bakery = "bakery"
    beverages = "beverages"
    other = "other"


class GroceryItem(BaseEntity):
    """Aggregated, categorized ingredient entry ready for shopping"""
    name: str = Field(..., description="Ingredient name as first seen across recipes")
    amount: float = Field(..., description="Summed, serving-scaled quantity")
    unit: str = Field(default="", description="Unit shared by every merged line")
    category: GroceryCategory = Field(GroceryCategory.other, description="Aisle grouping")
    notes: str = Field(default="", description="Notes of merged lines joined with '; '")
    is_completed: bool = Field(False, description="Whether item has been shopped", alias="isCompleted")
    recipe_ids: List[str] = Field(default_factory=list, description="Recipes that contributed to this item", alias="recipeIds")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440002",
                "name": "tomatoes",
                "amount": 8,
                "unit": "",
                "category": "produce",
                "notes": "ripe and red; organic preferred",
                "isCompleted": False,
                "recipeIds": ["recipe1", "recipe2"]
            }
        }
    }


class GroceryList(BaseEntity):
    """Persisted grocery list record"""
    title: str = Field(..., description="List title")
    items: List[GroceryItem] = Field(default_factory=list, description="Sorted grocery items")
    user_id: str = Field(..., description="Owner of the list", alias="userId")
    generated_from: List[str] = Field(default_factory=list, description="Recipe IDs requested for generation", alias="generatedFrom")
    created_at: datetime = Field(default_factory=datetime.now, alias="createdAt")
    updated_at: datetime = Field(default_factory=datetime.now, alias="updatedAt")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440005",
                "title": "Grocery List for Pasta Salad, Tomato Soup",
                "items": [],
                "userId": "user1",
                "generatedFrom": ["recipe1", "recipe2"],
                "createdAt": "2024-01-01T12:00:00",
                "updatedAt": "2024-01-01T12:00:00"
            }
        }
    }


class GroceryListGenerationRequest(BaseModel):
    """Model for generating a grocery list from recipes"""
    recipe_ids: Optional[List[str]] = Field(None, alias="recipeIds")
    serving_adjustments: Optional[Dict[str, PositiveFloat]] = Field(None, alias="servingAdjustments")
    title: Optional[str] = None

    model_config = {
        "populate_by_name": True
    }


class GroceryListUpdateRequest(BaseModel):
    """Model for updating an existing grocery list"""
    title: Optional[str] = None
    items: Optional[List[GroceryItem]] = None

    model_config = {
        "populate_by_name": True
    }


class Pagination(BaseModel):
    page: int
    limit: int
    has_more: bool = Field(..., alias="hasMore")

    model_config = {
        "populate_by_name": True
    }


class GroceryListPage(BaseModel):
    """One page of a user's grocery lists"""
    grocery_lists: List[GroceryList] = Field(default_factory=list, alias="groceryLists")
    pagination: Pagination

    model_config = {
        "populate_by_name": True
    }
