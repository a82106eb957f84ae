from datetime import datetime

import logfire
from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_current_user_id, get_storage
from config.settings import settings
from models.grocery_list import (
    GroceryList,
    GroceryListGenerationRequest,
    GroceryListPage,
    GroceryListUpdateRequest,
    Pagination,
)
from services.grocery_list_generator import create_grocery_list, find_inaccessible_recipes
from storage.local_storage import LocalStorage

router = APIRouter()


@router.post("/generate", response_model=GroceryList, status_code=status.HTTP_201_CREATED)
async def generate_grocery_list(
    request: GroceryListGenerationRequest,
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """Generate and save a grocery list from the requested recipes"""
    try:
        if not request.recipe_ids:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Recipe IDs are required"
            )

        recipes = storage.get_recipes_by_ids(request.recipe_ids)
        if not recipes:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No recipes found with the provided IDs"
            )

        denied = find_inaccessible_recipes(recipes, user_id)
        if denied:
            logfire.warn("grocery_list_access_denied",
                         user_id=user_id,
                         recipe_ids=[recipe.id for recipe in denied])
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied to some recipes"
            )

        grocery_list = create_grocery_list(
            recipes,
            user_id=user_id,
            recipe_ids=request.recipe_ids,
            serving_adjustments=request.serving_adjustments,
            title=request.title,
        )
        storage.add_grocery_list(grocery_list)

        logfire.info("grocery_list_generated",
                     list_id=grocery_list.id,
                     user_id=user_id,
                     recipe_count=len(recipes),
                     item_count=len(grocery_list.items))
        return grocery_list
    except HTTPException:
        raise
    except Exception as e:
        logfire.error("grocery_list_generation_failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate grocery list: {str(e)}"
        )


@router.get("", response_model=GroceryListPage)
async def list_grocery_lists(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """List the user's grocery lists, most recently updated first"""
    try:
        offset = (page - 1) * limit
        grocery_lists = storage.get_grocery_lists_for_user(user_id, limit=limit, offset=offset)
        return GroceryListPage(
            grocery_lists=grocery_lists,
            pagination=Pagination(page=page, limit=limit, has_more=len(grocery_lists) == limit),
        )
    except Exception as e:
        logfire.error("grocery_list_fetch_failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch grocery lists: {str(e)}"
        )


def _get_owned_list(storage: LocalStorage, grocery_list_id: str, user_id: str) -> GroceryList:
    grocery_list = storage.get_grocery_list(grocery_list_id, user_id)
    if not grocery_list:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Grocery list not found"
        )
    return grocery_list


@router.get("/{grocery_list_id}", response_model=GroceryList)
async def get_grocery_list(
    grocery_list_id: str,
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """Get a specific grocery list"""
    try:
        return _get_owned_list(storage, grocery_list_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logfire.error("grocery_list_fetch_failed", list_id=grocery_list_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch grocery list: {str(e)}"
        )


@router.put("/{grocery_list_id}", response_model=GroceryList)
async def update_grocery_list(
    grocery_list_id: str,
    update: GroceryListUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """Update the title and/or items of a grocery list"""
    try:
        grocery_list = _get_owned_list(storage, grocery_list_id, user_id)

        if update.title is not None:
            grocery_list.title = update.title
        if update.items is not None:
            grocery_list.items = update.items
        grocery_list.updated_at = datetime.now()

        storage.update_grocery_list(grocery_list)
        return grocery_list
    except HTTPException:
        raise
    except Exception as e:
        logfire.error("grocery_list_update_failed", list_id=grocery_list_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update grocery list: {str(e)}"
        )


@router.delete("/{grocery_list_id}")
async def delete_grocery_list(
    grocery_list_id: str,
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """Delete a grocery list"""
    try:
        _get_owned_list(storage, grocery_list_id, user_id)
        storage.delete_grocery_list(grocery_list_id)
        logfire.info("grocery_list_deleted", list_id=grocery_list_id, user_id=user_id)
        return {"message": "Grocery list deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logfire.error("grocery_list_delete_failed", list_id=grocery_list_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete grocery list: {str(e)}"
        )


@router.put("/{grocery_list_id}/items/{item_id}/toggle-completed", response_model=GroceryList)
async def toggle_item_completed(
    grocery_list_id: str,
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    storage: LocalStorage = Depends(get_storage),
):
    """Toggle the completed status of a grocery item"""
    try:
        grocery_list = _get_owned_list(storage, grocery_list_id, user_id)

        item_found = False
        for item in grocery_list.items:
            if item.id == item_id:
                item.is_completed = not item.is_completed
                item_found = True
                break

        if not item_found:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Grocery item with ID {item_id} not found"
            )

        grocery_list.updated_at = datetime.now()
        storage.update_grocery_list(grocery_list)
        return grocery_list
    except HTTPException:
        raise
    except Exception as e:
        logfire.error("grocery_item_toggle_failed", list_id=grocery_list_id, item_id=item_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to toggle item completion: {str(e)}"
        )
