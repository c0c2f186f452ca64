from typing import Optional

from fastapi import APIRouter, Body, Depends

from schemas import (AccountResponse, BasketCountEdit, BasketItemResponse, BasketPurchaseResponse,
                     DepositRequest, List, PurchaseRequest)
from services import Services
from .deps import get_services, get_token

router = APIRouter()

@router.put("/deposits", response_model=AccountResponse, response_model_exclude_none=True)
def put_deposit(
    deposit: DepositRequest,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.purchases.put_deposit(token, deposit.deposit)

@router.get("/deposits", response_model=AccountResponse, response_model_exclude_none=True)
def get_deposit(
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.purchases.get_deposit(token)

# ✅ Achat direct d'un produit
@router.post("/purchases", response_model=BasketItemResponse)
def buy_product(
    product: PurchaseRequest,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.purchases.buy_product(token, product.id, product.name, product.price, product.count)

@router.post("/purchases/baskets", response_model=BasketPurchaseResponse)
def buy_basket(
    products: List[PurchaseRequest] = Body(...),
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.purchases.buy_basket(token, products)

@router.post("/baskets", response_model=List[BasketItemResponse])
def add_to_basket(
    product: PurchaseRequest,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.purchases.add_to_basket(token, product.id, product.name, product.price, product.count)

@router.put("/baskets", response_model=List[BasketItemResponse])
def edit_basket_count(
    product: BasketCountEdit,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.purchases.edit_basket_count(token, product.id, product.name, product.price, product.count)

@router.get("/baskets", response_model=List[BasketItemResponse])
def get_basket(
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.purchases.get_basket(token)

@router.delete("/baskets/{id}")
def delete_from_basket(
    id: int,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    services.purchases.delete_from_basket(token, id)
    return {}
