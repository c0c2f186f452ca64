from . import BaseModel, ConfigDict, Field, Optional, MAX_NAME_LENGTH

# ✅ Schéma pour Category
class CategoryCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    parent_id: Optional[int] = Field(None, alias="parentId")

class CategoryEdit(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    parent_id: Optional[int] = Field(None, alias="parentId")

class CategoryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    parent_id: Optional[int] = Field(None, alias="parentId")
    parent_name: Optional[str] = Field(None, alias="parentName")
