from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError

from schemas import List, ProductCreate, ProductEdit, ProductResponse, SortOrder
from services import Services
from .deps import get_services, get_token

router = APIRouter()

def parse_category_filter(category: Optional[str]) -> Optional[List[int]]:
    """``None`` : pas de filtre ; ``""`` : produits sans catégorie ; ``"1,2"`` : ces catégories."""
    if category is None:
        return None
    try:
        return [int(part) for part in category.split(",") if part.strip()]
    except ValueError:
        raise RequestValidationError([{
            "loc": ("query", "category"),
            "msg": "Liste d'identifiants séparés par des virgules attendue",
            "type": "value_error",
        }])

@router.get("/products", response_model=List[ProductResponse], response_model_exclude_none=True)
def products(
    category: Optional[str] = Query(None, alias="category"),  # Filtre par catégories
    order: SortOrder = Query(SortOrder.PRODUCT, alias="order"),  # Ordre de tri
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.catalog.list(token, parse_category_filter(category), order)

@router.get("/products/{id}", response_model=ProductResponse, response_model_exclude_none=True)
def get_product(
    id: int,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.catalog.get(token, id)

@router.post("/products", response_model=ProductResponse, response_model_exclude_none=True)
def create_product(
    product: ProductCreate,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.catalog.add(token, product.name, product.price, product.count, product.categories)

@router.put("/products/{id}", response_model=ProductResponse, response_model_exclude_none=True)
def update_product(
    id: int,
    product: ProductEdit,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.catalog.edit(token, id, product.name, product.price, product.count, product.categories)

@router.delete("/products/{id}")
def delete_product(
    id: int,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    services.catalog.delete(token, id)
    return {}
