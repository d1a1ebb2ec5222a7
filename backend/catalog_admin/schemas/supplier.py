from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SupplierBase(BaseModel):
    """Base schema for Supplier"""
    name: str = Field(..., min_length=1, max_length=255, description="Supplier name")
    description: Optional[str] = Field(None, description="Free text description")


class SupplierCreate(SupplierBase):
    """Schema to create a supplier"""
    pass


class SupplierUpdate(BaseModel):
    """Schema to update a supplier (fields left out keep their value, required columns reject null)"""
    name: str = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class SupplierResponse(SupplierBase):
    """Schema returned by the API"""
    id: int
    products_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SupplierListResponse(BaseModel):
    """Paginated list"""
    total: int
    page: int
    page_size: int
    items: list[SupplierResponse]
