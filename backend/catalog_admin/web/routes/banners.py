"""
Banner pages
"""
from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db, get_storage
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.core.exceptions import validate_form
from catalog_admin.schemas.banner import (
    BannerCreate, BannerUpdate, BannerResponse, BannerListResponse, BannerReorderRequest
)
from catalog_admin.services.banner_service import banner_service
from catalog_admin.services.supplier_service import supplier_service
from catalog_admin.services.storage_service import PublicStorage
from catalog_admin.web.inertia import render, redirect, back, flash, serialize

router = APIRouter()


@router.get("")
def index(
    request: Request,
    page: int = Query(1, ge=1),
    supplier_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    is_active: Optional[bool] = Query(None),
    db: Session = Depends(get_db)
):
    banners = banner_service.list_page(db, page, settings.DEFAULT_PAGE_SIZE, supplier_id, is_active)
    return render(request, "banners/index", {
        "banners": serialize(BannerListResponse, banners),
        "suppliers": supplier_service.options(db),
        "filters": {"supplier_id": supplier_id, "is_active": is_active},
    })


@router.get("/create")
def create(request: Request, db: Session = Depends(get_db)):
    return render(request, "banners/create", {"suppliers": supplier_service.options(db)})


@router.post("")
def store(
    request: Request,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    supplier_id: Optional[int] = Form(None),
    is_active: Optional[bool] = Form(None),
    order: Optional[int] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    data = validate_form(
        BannerCreate,
        title=title, description=description, supplier_id=supplier_id,
        is_active=is_active, order=order
    )
    banner_service.create(db, storage, data, image)
    flash(request, "Banner created successfully.")
    return redirect("/banners")


@router.post("/reorder")
def reorder(
    request: Request,
    payload: BannerReorderRequest,
    db: Session = Depends(get_db)
):
    banner_service.reorder(db, payload)
    return back(request, "/banners")


@router.get("/{banner_id}")
def show(request: Request, banner_id: int, db: Session = Depends(get_db)):
    banner = banner_service.get(db, banner_id)
    return render(request, "banners/show", {"banner": serialize(BannerResponse, banner)})


@router.get("/{banner_id}/edit")
def edit(request: Request, banner_id: int, db: Session = Depends(get_db)):
    banner = banner_service.get(db, banner_id)
    return render(request, "banners/edit", {
        "banner": serialize(BannerResponse, banner),
        "suppliers": supplier_service.options(db),
    })


# Multipart edit forms POST here, like gallery images
@router.api_route("/{banner_id}", methods=["PUT", "PATCH", "POST"])
def update(
    request: Request,
    banner_id: int,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    supplier_id: Optional[int] = Form(None),
    is_active: Optional[bool] = Form(None),
    order: Optional[int] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    banner = banner_service.get(db, banner_id)
    data = validate_form(
        BannerUpdate,
        title=title or "", description=description or "", supplier_id=supplier_id or "",
        is_active=is_active, order=order if order is not None else ""
    )
    banner_service.update(db, storage, banner, data, image)
    flash(request, "Banner updated successfully.")
    return redirect("/banners")


@router.delete("/{banner_id}")
def destroy(
    request: Request,
    banner_id: int,
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    banner = banner_service.get(db, banner_id)
    banner_service.delete(db, storage, banner)
    flash(request, "Banner deleted successfully.")
    return redirect("/banners")
