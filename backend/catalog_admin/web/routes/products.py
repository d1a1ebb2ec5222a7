"""
Product pages
"""
from fastapi import APIRouter, Depends, Form, Query, Request
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.core.exceptions import validate_form
from catalog_admin.schemas.product import ProductCreate, ProductUpdate, ProductResponse, ProductListResponse
from catalog_admin.schemas.product_gallery import GalleryReorderRequest
from catalog_admin.services.product_service import product_service
from catalog_admin.services.category_service import category_service
from catalog_admin.services.supplier_service import supplier_service
from catalog_admin.services.gallery_service import gallery_service
from catalog_admin.web.inertia import render, redirect, back, flash, serialize

router = APIRouter()


def _form_options(db: Session) -> dict:
    return {
        "suppliers": supplier_service.options(db),
        "categories": category_service.options(db),
    }


@router.get("")
def index(
    request: Request,
    page: int = Query(1, ge=1),
    supplier_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    category_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    products = product_service.list_page(
        db, page, settings.DEFAULT_PAGE_SIZE, supplier_id, category_id, search
    )
    return render(request, "products/index", {
        "products": serialize(ProductListResponse, products),
        "filters": {"supplier_id": supplier_id, "category_id": category_id, "search": search},
        **_form_options(db),
    })


@router.get("/create")
def create(request: Request, db: Session = Depends(get_db)):
    return render(request, "products/create", _form_options(db))


@router.post("")
def store(
    request: Request,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    supplier_id: Optional[int] = Form(None),
    category_id: Optional[int] = Form(None),
    db: Session = Depends(get_db)
):
    data = validate_form(
        ProductCreate,
        name=name, description=description, supplier_id=supplier_id, category_id=category_id
    )
    product_service.create(db, data)
    flash(request, "Product created successfully.")
    return redirect("/products")


@router.post("/{product_id}/galleries/reorder")
def reorder_galleries(
    request: Request,
    product_id: int,
    payload: GalleryReorderRequest,
    db: Session = Depends(get_db)
):
    gallery_service.reorder(db, product_id, payload)
    return back(request, f"/products/{product_id}")


@router.get("/{product_id}")
def show(request: Request, product_id: int, db: Session = Depends(get_db)):
    product = product_service.get(db, product_id)
    return render(request, "products/show", {"product": serialize(ProductResponse, product)})


@router.get("/{product_id}/edit")
def edit(request: Request, product_id: int, db: Session = Depends(get_db)):
    product = product_service.get(db, product_id)
    return render(request, "products/edit", {
        "product": serialize(ProductResponse, product),
        **_form_options(db),
    })


@router.api_route("/{product_id}", methods=["PUT", "PATCH"])
def update(
    request: Request,
    product_id: int,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    supplier_id: Optional[int] = Form(None),
    category_id: Optional[int] = Form(None),
    db: Session = Depends(get_db)
):
    product = product_service.get(db, product_id)
    data = validate_form(
        ProductUpdate,
        name=name or "", description=description or "",
        supplier_id=supplier_id or "", category_id=category_id or ""
    )
    product_service.update(db, product, data)
    flash(request, "Product updated successfully.")
    return redirect("/products")


@router.delete("/{product_id}")
def destroy(request: Request, product_id: int, db: Session = Depends(get_db)):
    product = product_service.get(db, product_id)
    product_service.delete(db, product)
    flash(request, "Product deleted successfully.")
    return redirect("/products")
