from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from catalog_admin.schemas.common import OptionResponse, MAX_ROW_ID, MAX_POSITION


class CategoryBase(BaseModel):
    """Base schema for ProductCategory"""
    name: str = Field(..., min_length=1, max_length=255, description="Category name")
    description: Optional[str] = Field(None, description="Free text description")
    supplier_id: int = Field(..., ge=1, le=MAX_ROW_ID, description="Owning supplier ID")
    order: int = Field(0, ge=0, le=MAX_POSITION, description="Display position")


class CategoryCreate(CategoryBase):
    """Schema to create a category"""
    pass


class CategoryUpdate(BaseModel):
    """Schema to update a category (fields left out keep their value, required columns reject null)"""
    name: str = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    supplier_id: int = Field(None, ge=1, le=MAX_ROW_ID)
    order: int = Field(None, ge=0, le=MAX_POSITION)


class CategoryResponse(CategoryBase):
    """Schema returned by the API"""
    id: int
    supplier: Optional[OptionResponse] = None
    products_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CategoryListResponse(BaseModel):
    """Paginated list"""
    total: int
    page: int
    page_size: int
    items: list[CategoryResponse]


class CategoryOrderItem(BaseModel):
    """Category positions may start at 0"""
    id: int = Field(..., ge=1, le=MAX_ROW_ID)
    order: int = Field(..., ge=0, le=MAX_POSITION)


class CategoryReorderRequest(BaseModel):
    """Full list of categories with their new positions"""
    categories: List[CategoryOrderItem] = Field(..., min_length=1)
