"""
Product routes, including the reorder of a product gallery
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.schemas.common import ReorderResponse
from catalog_admin.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse
)
from catalog_admin.schemas.product_gallery import GalleryReorderRequest
from catalog_admin.services.product_service import product_service
from catalog_admin.services.gallery_service import gallery_service

router = APIRouter()


@router.post("/", response_model=ProductResponse, status_code=201)
def create_product(
    product: ProductCreate,
    db: Session = Depends(get_db)
):
    """Create a product"""
    return product_service.create(db, product)


@router.get("/", response_model=ProductListResponse)
def list_products(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
    supplier_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    category_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    search: Optional[str] = Query(None, description="Search by name"),
    db: Session = Depends(get_db)
):
    """List products with supplier, category and gallery, newest first"""
    return product_service.list_page(db, page, page_size, supplier_id, category_id, search)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    return product_service.get(db, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_update: ProductUpdate,
    db: Session = Depends(get_db)
):
    product = product_service.get(db, product_id)
    return product_service.update(db, product, product_update)


@router.delete("/{product_id}", status_code=204)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    product = product_service.get(db, product_id)
    product_service.delete(db, product)
    return None


# ============ GALLERY ORDER ============

@router.post("/{product_id}/galleries/reorder", response_model=ReorderResponse)
def reorder_product_galleries(
    product_id: int,
    payload: GalleryReorderRequest,
    db: Session = Depends(get_db)
):
    """
    Save new positions for the images of a product

    Images that belong to another product are skipped.
    """
    updated = gallery_service.reorder(db, product_id, payload)
    return {"message": "Gallery order updated successfully.", "updated": updated}
