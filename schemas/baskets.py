from . import BaseModel, Field, List, Optional

# Ce que le client croit savoir du produit ; le nom et le prix doivent correspondre au catalogue
class PurchaseRequest(BaseModel):
    id: int
    name: str = Field(..., min_length=1)
    price: int = Field(..., gt=0)
    count: Optional[int] = Field(None, ge=1)

class BasketCountEdit(PurchaseRequest):
    count: int = Field(..., ge=1)

class BasketItemResponse(BaseModel):
    id: int
    name: str
    price: int
    count: int

class BasketPurchaseResponse(BaseModel):
    bought: List[BasketItemResponse]
    remaining: List[BasketItemResponse]
