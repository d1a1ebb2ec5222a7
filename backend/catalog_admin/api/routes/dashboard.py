"""
Dashboard routes - catalog statistics
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from pydantic import BaseModel
from datetime import datetime
from catalog_admin.api.deps import get_db
from catalog_admin.services.dashboard_service import dashboard_service

router = APIRouter()


# ============ SCHEMAS ============

class DashboardStats(BaseModel):
    products: int
    suppliers: int
    categories: int
    galleries: int


class ChartEntry(BaseModel):
    name: str
    count: int


class RecentProduct(BaseModel):
    id: int
    name: str
    supplier: str
    created_at: datetime


class CategoryEntry(BaseModel):
    id: int
    name: str
    supplier: str
    products_count: int


class ProductEntry(BaseModel):
    id: int
    name: str
    supplier: str


class DashboardResponse(BaseModel):
    stats: DashboardStats
    productsBySupplier: List[ChartEntry]
    productsByCategory: List[ChartEntry]
    recentProducts: List[RecentProduct]
    allCategories: List[CategoryEntry]
    allProducts: List[ProductEntry]


# ============ ENDPOINTS ============

@router.get("/", response_model=DashboardResponse)
def get_dashboard(db: Session = Depends(get_db)):
    """
    Dashboard figures.

    Returns:
    - Counts of products, suppliers, categories and gallery images
    - Top 5 suppliers and categories by number of products
    - The 5 newest products
    - Up to 10 categories and 10 products by name
    """
    return dashboard_service.summary(db)
