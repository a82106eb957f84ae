from typing import List

import logfire
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_current_user_id, get_storage
from models.recipe import Recipe, RecipeCreate
from services.grocery_list_generator import find_inaccessible_recipes
from storage.local_storage import LocalStorage

router = APIRouter()


@router.post("", response_model=Recipe, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe_data: RecipeCreate,
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """Create a new recipe owned by the caller"""
    try:
        recipe = Recipe(**recipe_data.model_dump(), author_id=user_id)
        storage.add_recipe(recipe)
        logfire.info("recipe_created", recipe_id=recipe.id, user_id=user_id,
                     ingredient_count=len(recipe.ingredients))
        return recipe
    except Exception as e:
        logfire.error("recipe_create_failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create recipe: {str(e)}"
        )


@router.get("", response_model=List[Recipe])
async def list_recipes(
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """List recipes the caller owns plus public recipes"""
    try:
        return storage.get_recipes_visible_to(user_id)
    except Exception as e:
        logfire.error("recipe_fetch_failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load recipes: {str(e)}"
        )


@router.get("/{recipe_id}", response_model=Recipe)
async def get_recipe(
    recipe_id: str,
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """Get a specific recipe by ID"""
    try:
        recipe = storage.get_recipe_by_id(recipe_id)
        if not recipe:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Recipe with ID {recipe_id} not found"
            )
        if find_inaccessible_recipes([recipe], user_id):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied to this recipe"
            )
        return recipe
    except HTTPException:
        raise
    except Exception as e:
        logfire.error("recipe_fetch_failed", recipe_id=recipe_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load recipe: {str(e)}"
        )
