from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from trackify.models.category import CategoryPublic
from trackify.routers.deps import get_category_service, get_current_user_id
from trackify.services.categories import CategoryService
from trackify.validation.validator import validate_category_create

router = APIRouter()


@router.get("", response_model=List[CategoryPublic])
def list_categories(
    user_id: int = Depends(get_current_user_id),
    categories: CategoryService = Depends(get_category_service),
):
    return categories.list_categories(user_id)


@router.post("", response_model=CategoryPublic, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: Any = Body(...),
    user_id: int = Depends(get_current_user_id),
    categories: CategoryService = Depends(get_category_service),
):
    category = validate_category_create(payload).unwrap()
    return categories.create_category(user_id, category.name)
