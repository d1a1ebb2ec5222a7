"""
Supplier routes
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db
from catalog_admin.config import settings
from catalog_admin.models.supplier import Supplier
from catalog_admin.schemas.supplier import (
    SupplierCreate,
    SupplierUpdate,
    SupplierResponse,
    SupplierListResponse
)
from catalog_admin.api.utils import get_by_id
from catalog_admin.services.supplier_service import supplier_service

router = APIRouter()


@router.post("/", response_model=SupplierResponse, status_code=201)
def create_supplier(
    supplier: SupplierCreate,
    db: Session = Depends(get_db)
):
    """Create a supplier"""
    return supplier_service.count_products(db, supplier_service.create(db, supplier))


@router.get("/", response_model=SupplierListResponse)
def list_suppliers(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search by name"),
    db: Session = Depends(get_db)
):
    """List suppliers, newest first"""
    return supplier_service.list_page(db, page, page_size, search)


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(
    supplier_id: int,
    db: Session = Depends(get_db)
):
    supplier = get_by_id(db, Supplier, supplier_id, error_message="Supplier not found")
    return supplier_service.count_products(db, supplier)


@router.put("/{supplier_id}", response_model=SupplierResponse)
def update_supplier(
    supplier_id: int,
    supplier_update: SupplierUpdate,
    db: Session = Depends(get_db)
):
    supplier = get_by_id(db, Supplier, supplier_id, error_message="Supplier not found")
    supplier = supplier_service.update(db, supplier, supplier_update)
    return supplier_service.count_products(db, supplier)


@router.delete("/{supplier_id}", status_code=204)
def delete_supplier(
    supplier_id: int,
    db: Session = Depends(get_db)
):
    """Delete a supplier with its categories, products and banners"""
    supplier = get_by_id(db, Supplier, supplier_id, error_message="Supplier not found")
    supplier_service.delete(db, supplier)
    return None
