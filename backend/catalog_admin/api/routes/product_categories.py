"""
Product category routes
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, joinedload
from typing import Optional
from catalog_admin.api.deps import get_db
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.models.product_category import ProductCategory
from catalog_admin.schemas.common import ReorderResponse
from catalog_admin.schemas.product_category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryListResponse,
    CategoryReorderRequest
)
from catalog_admin.api.utils import get_by_id
from catalog_admin.services.category_service import category_service

router = APIRouter()


def _get_category(db: Session, category_id: int) -> ProductCategory:
    category = get_by_id(
        db, ProductCategory, category_id,
        error_message="Category not found",
        options=[joinedload(ProductCategory.supplier)]
    )
    return category_service.count_products(db, category)


@router.post("/", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    db: Session = Depends(get_db)
):
    """Create a category for a supplier"""
    created = category_service.create(db, category)
    return _get_category(db, created.id)


@router.get("/", response_model=CategoryListResponse)
def list_categories(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
    supplier_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    search: Optional[str] = Query(None, description="Search by name"),
    db: Session = Depends(get_db)
):
    """List categories by display order"""
    return category_service.list_page(db, page, page_size, supplier_id, search)


@router.post("/reorder", response_model=ReorderResponse)
def reorder_categories(
    payload: CategoryReorderRequest,
    db: Session = Depends(get_db)
):
    """
    Save the positions of a drag-and-drop category list

    Every entry is written with its own UPDATE, all in one transaction.
    """
    updated = category_service.reorder(db, payload)
    return {"message": "Categories reordered successfully.", "updated": updated}


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    return _get_category(db, category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category_update: CategoryUpdate,
    db: Session = Depends(get_db)
):
    category = get_by_id(db, ProductCategory, category_id, error_message="Category not found")
    category_service.update(db, category, category_update)
    return _get_category(db, category_id)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    category = get_by_id(db, ProductCategory, category_id, error_message="Category not found")
    category_service.delete(db, category)
    return None
