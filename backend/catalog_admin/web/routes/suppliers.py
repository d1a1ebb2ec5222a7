"""
Supplier pages
"""
from fastapi import APIRouter, Depends, Form, Query, Request
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db
from catalog_admin.config import settings
from catalog_admin.core.exceptions import validate_form
from catalog_admin.models.supplier import Supplier
from catalog_admin.schemas.supplier import (
    SupplierCreate, SupplierUpdate, SupplierResponse, SupplierListResponse
)
from catalog_admin.api.utils import get_by_id
from catalog_admin.services.supplier_service import supplier_service
from catalog_admin.web.inertia import render, redirect, flash, serialize

router = APIRouter()


@router.get("")
def index(
    request: Request,
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    suppliers = supplier_service.list_page(db, page, settings.DEFAULT_PAGE_SIZE, search)
    return render(request, "suppliers/index", {
        "suppliers": serialize(SupplierListResponse, suppliers),
        "filters": {"search": search},
    })


@router.get("/create")
def create(request: Request):
    return render(request, "suppliers/create")


@router.post("")
def store(
    request: Request,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    data = validate_form(SupplierCreate, name=name, description=description)
    supplier_service.create(db, data)
    flash(request, "Supplier created successfully.")
    return redirect("/suppliers")


@router.get("/{supplier_id}")
def show(request: Request, supplier_id: int, db: Session = Depends(get_db)):
    supplier = supplier_service.count_products(db, get_by_id(db, Supplier, supplier_id))
    return render(request, "suppliers/show", {"supplier": serialize(SupplierResponse, supplier)})


@router.get("/{supplier_id}/edit")
def edit(request: Request, supplier_id: int, db: Session = Depends(get_db)):
    supplier = get_by_id(db, Supplier, supplier_id)
    return render(request, "suppliers/edit", {"supplier": serialize(SupplierResponse, supplier)})


@router.api_route("/{supplier_id}", methods=["PUT", "PATCH"])
def update(
    request: Request,
    supplier_id: int,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    supplier = get_by_id(db, Supplier, supplier_id)
    # Edit forms post every field, blank ones count as cleared
    data = validate_form(SupplierUpdate, name=name or "", description=description or "")
    supplier_service.update(db, supplier, data)
    flash(request, "Supplier updated successfully.")
    return redirect("/suppliers")


@router.delete("/{supplier_id}")
def destroy(request: Request, supplier_id: int, db: Session = Depends(get_db)):
    supplier = get_by_id(db, Supplier, supplier_id)
    supplier_service.delete(db, supplier)
    flash(request, "Supplier deleted successfully.")
    return redirect("/suppliers")
