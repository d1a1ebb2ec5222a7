"""
Product category pages
"""
from fastapi import APIRouter, Depends, Form, Query, Request
from sqlalchemy.orm import Session, joinedload
from typing import Optional
from catalog_admin.api.deps import get_db
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.core.exceptions import validate_form
from catalog_admin.models.product_category import ProductCategory
from catalog_admin.schemas.product_category import (
    CategoryCreate, CategoryUpdate, CategoryResponse, CategoryListResponse, CategoryReorderRequest
)
from catalog_admin.api.utils import get_by_id
from catalog_admin.services.category_service import category_service
from catalog_admin.services.supplier_service import supplier_service
from catalog_admin.web.inertia import render, redirect, back, flash, serialize

router = APIRouter()


def _get_category(db: Session, category_id: int) -> ProductCategory:
    return get_by_id(db, ProductCategory, category_id, options=[joinedload(ProductCategory.supplier)])


@router.get("")
def index(
    request: Request,
    page: int = Query(1, ge=1),
    supplier_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    categories = category_service.list_page(db, page, settings.DEFAULT_PAGE_SIZE, supplier_id, search)
    return render(request, "product-categories/index", {
        "categories": serialize(CategoryListResponse, categories),
        "suppliers": supplier_service.options(db),
        "filters": {"supplier_id": supplier_id, "search": search},
    })


@router.get("/create")
def create(request: Request, db: Session = Depends(get_db)):
    return render(request, "product-categories/create", {"suppliers": supplier_service.options(db)})


@router.post("")
def store(
    request: Request,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    supplier_id: Optional[int] = Form(None),
    order: Optional[int] = Form(None),
    db: Session = Depends(get_db)
):
    data = validate_form(
        CategoryCreate, name=name, description=description, supplier_id=supplier_id, order=order
    )
    category_service.create(db, data)
    flash(request, "Category created successfully.")
    return redirect("/product-categories")


@router.post("/reorder")
def reorder(
    request: Request,
    payload: CategoryReorderRequest,
    db: Session = Depends(get_db)
):
    category_service.reorder(db, payload)
    return back(request, "/product-categories")


@router.get("/{category_id}")
def show(request: Request, category_id: int, db: Session = Depends(get_db)):
    category = category_service.count_products(db, _get_category(db, category_id))
    return render(request, "product-categories/show", {"category": serialize(CategoryResponse, category)})


@router.get("/{category_id}/edit")
def edit(request: Request, category_id: int, db: Session = Depends(get_db)):
    category = _get_category(db, category_id)
    return render(request, "product-categories/edit", {
        "category": serialize(CategoryResponse, category),
        "suppliers": supplier_service.options(db),
    })


@router.api_route("/{category_id}", methods=["PUT", "PATCH"])
def update(
    request: Request,
    category_id: int,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    supplier_id: Optional[int] = Form(None),
    order: Optional[int] = Form(None),
    db: Session = Depends(get_db)
):
    category = _get_category(db, category_id)
    data = validate_form(
        CategoryUpdate,
        name=name or "", description=description or "", supplier_id=supplier_id or "", order=order
    )
    category_service.update(db, category, data)
    flash(request, "Category updated successfully.")
    return redirect("/product-categories")


@router.delete("/{category_id}")
def destroy(request: Request, category_id: int, db: Session = Depends(get_db)):
    category = _get_category(db, category_id)
    category_service.delete(db, category)
    flash(request, "Category deleted successfully.")
    return redirect("/product-categories")
