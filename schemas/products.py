from . import BaseModel, ConfigDict, Enum, Field, List, Optional, MAX_NAME_LENGTH

class SortOrder(str, Enum):
    PRODUCT = "product"
    CATEGORY = "category"

class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    price: int = Field(..., gt=0)
    count: Optional[int] = Field(None, ge=0, description="Quantité en stock, 0 par défaut")
    categories: Optional[List[int]] = None

class ProductEdit(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    price: Optional[int] = Field(None, gt=0)
    count: Optional[int] = Field(None, ge=0)
    categories: Optional[List[int]] = None

class ProductResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    price: int
    count: int
    categories: Optional[List[int]] = None  # Absent dans un tri par catégorie sans catégorie
