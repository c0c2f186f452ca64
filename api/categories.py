from typing import Optional

from fastapi import APIRouter, Depends

from schemas import CategoryCreate, CategoryEdit, CategoryResponse, List
from services import Services
from .deps import get_services, get_token

router = APIRouter()

@router.get("/categories", response_model=List[CategoryResponse], response_model_exclude_none=True)
def categories(
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.categories.list(token)

# ✅ Endpoint pour ajouter une catégorie
@router.post("/categories", response_model=CategoryResponse, response_model_exclude_none=True)
def create_category(
    category: CategoryCreate,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.categories.add(token, category.name, category.parent_id)

@router.get("/categories/{id}", response_model=CategoryResponse, response_model_exclude_none=True)
def get_category(
    id: int,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.categories.get(token, id)

@router.put("/categories/{id}", response_model=CategoryResponse, response_model_exclude_none=True)
def update_category(
    id: int,
    category: CategoryEdit,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.categories.edit(token, id, category.name, category.parent_id)

@router.delete("/categories/{id}")
def delete_category(
    id: int,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    services.categories.delete(token, id)
    return {}
