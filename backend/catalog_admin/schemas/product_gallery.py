from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from catalog_admin.schemas.common import OptionResponse, ReorderItem, MAX_ROW_ID, MAX_POSITION


class GalleryCreate(BaseModel):
    """Form fields to add an image (the file itself is a separate upload)"""
    product_id: int = Field(..., ge=1, le=MAX_ROW_ID, description="Product ID")
    order: int = Field(..., ge=1, le=MAX_POSITION, description="Position inside the product gallery")


class GalleryUpdate(BaseModel):
    """Form fields to update an image"""
    product_id: int = Field(..., ge=1, le=MAX_ROW_ID, description="Product ID")
    order: Optional[int] = Field(None, ge=0, le=MAX_POSITION)


class GalleryResponse(BaseModel):
    """Schema returned by the API"""
    id: int
    file_path: str
    file_url: Optional[str] = None
    product_id: int
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class GalleryDetailResponse(GalleryResponse):
    """Gallery image with its product"""
    product: Optional[OptionResponse] = None


class GalleryListResponse(BaseModel):
    """Paginated list"""
    total: int
    page: int
    page_size: int
    items: list[GalleryDetailResponse]


class GalleryReorderRequest(BaseModel):
    """Full gallery of one product with the new positions"""
    galleries: List[ReorderItem] = Field(..., min_length=1)
