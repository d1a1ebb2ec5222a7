from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from catalog_admin.schemas.common import OptionResponse, MAX_ROW_ID
from catalog_admin.schemas.product_gallery import GalleryResponse


class ProductBase(BaseModel):
    """Base schema for Product"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Free text description")
    supplier_id: int = Field(..., ge=1, le=MAX_ROW_ID, description="Supplier ID")
    category_id: Optional[int] = Field(None, ge=1, le=MAX_ROW_ID, description="Category ID")


class ProductCreate(ProductBase):
    """Schema to create a product"""
    pass


class ProductUpdate(BaseModel):
    """Schema to update a product (fields left out keep their value, required columns reject null)"""
    name: str = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    supplier_id: int = Field(None, ge=1, le=MAX_ROW_ID)
    category_id: Optional[int] = Field(None, ge=1, le=MAX_ROW_ID)


class CategorySummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ProductResponse(ProductBase):
    """Schema returned by the API, galleries come in display order"""
    id: int
    supplier: Optional[OptionResponse] = None
    category: Optional[CategorySummary] = None
    galleries: List[GalleryResponse] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    """Paginated list"""
    total: int
    page: int
    page_size: int
    items: list[ProductResponse]
