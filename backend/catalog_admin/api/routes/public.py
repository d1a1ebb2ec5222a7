"""
Public catalog routes (no authentication)

Read-only views of products and banners for the storefront.
"""
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from catalog_admin.api.deps import get_db
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.schemas.product import ProductResponse
from catalog_admin.schemas.banner import BannerResponse
from catalog_admin.services.product_service import product_service
from catalog_admin.services.banner_service import banner_service

router = APIRouter()


@router.get("/products", response_model=List[ProductResponse])
def list_public_products(
    supplier: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID, description="Supplier ID"),
    category: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID, description="Category ID"),
    db: Session = Depends(get_db)
):
    return product_service.list_public(db, supplier_id=supplier, category_id=category)


@router.get("/products/{product_id}", response_model=ProductResponse)
def get_public_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    return product_service.get(db, product_id)


@router.get("/banners", response_model=List[BannerResponse])
def list_public_banners(
    supplier_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    is_active: Optional[bool] = Query(None),
    db: Session = Depends(get_db)
):
    return banner_service.list_all(db, supplier_id=supplier_id, is_active=is_active)


@router.get("/banners/active", response_model=List[BannerResponse])
def list_active_banners(db: Session = Depends(get_db)):
    return banner_service.list_active(db)


@router.get("/banners/supplier/{supplier_id}", response_model=List[BannerResponse])
def list_supplier_banners(
    supplier_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    db: Session = Depends(get_db)
):
    """Active banners of a supplier, in display order"""
    return banner_service.list_for_supplier(db, supplier_id)


@router.get("/banners/{banner_id}", response_model=BannerResponse)
def get_public_banner(
    banner_id: int,
    db: Session = Depends(get_db)
):
    return banner_service.get(db, banner_id)
