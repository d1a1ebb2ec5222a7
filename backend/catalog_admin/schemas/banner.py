from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from catalog_admin.schemas.common import OptionResponse, ReorderItem, MAX_ROW_ID, MAX_POSITION


class BannerBase(BaseModel):
    """Base schema for Banner (the image is a separate upload)"""
    title: str = Field(..., min_length=1, max_length=255, description="Banner title")
    description: Optional[str] = Field(None, description="Free text description")
    supplier_id: int = Field(..., ge=1, le=MAX_ROW_ID, description="Supplier ID")
    is_active: bool = Field(True, description="Shown on the public API")
    order: int = Field(..., ge=1, le=MAX_POSITION, description="Position among the supplier banners")


class BannerCreate(BannerBase):
    """Schema to create a banner"""
    pass


class BannerUpdate(BaseModel):
    """Schema to update a banner (fields left out keep their value, required columns reject null)"""
    title: str = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    supplier_id: int = Field(None, ge=1, le=MAX_ROW_ID)
    is_active: bool = None
    order: int = Field(None, ge=1, le=MAX_POSITION)


class BannerResponse(BannerBase):
    """Schema returned by the API"""
    id: int
    image_path: Optional[str] = None
    image_url: Optional[str] = None
    supplier: Optional[OptionResponse] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BannerListResponse(BaseModel):
    """Paginated list"""
    total: int
    page: int
    page_size: int
    items: list[BannerResponse]


class BannerReorderRequest(BaseModel):
    """New positions of the banners of one supplier"""
    supplier_id: int = Field(..., ge=1, le=MAX_ROW_ID, description="Supplier whose banners are reordered")
    banners: List[ReorderItem] = Field(..., min_length=1)
