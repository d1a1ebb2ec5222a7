"""
Product gallery pages
"""
from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db, get_storage
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.core.exceptions import validate_form
from catalog_admin.schemas.product_gallery import (
    GalleryCreate, GalleryUpdate, GalleryDetailResponse, GalleryListResponse
)
from catalog_admin.services.gallery_service import gallery_service
from catalog_admin.services.product_service import product_service
from catalog_admin.services.storage_service import PublicStorage
from catalog_admin.web.inertia import render, redirect, flash, serialize

router = APIRouter()


@router.get("")
def index(
    request: Request,
    page: int = Query(1, ge=1),
    product_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    db: Session = Depends(get_db)
):
    galleries = gallery_service.list_page(db, page, settings.DEFAULT_PAGE_SIZE, product_id)
    return render(request, "product-galleries/index", {
        "galleries": serialize(GalleryListResponse, galleries),
        "products": product_service.options(db),
        "filters": {"product_id": product_id},
    })


@router.get("/create")
def create(
    request: Request,
    product_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    db: Session = Depends(get_db)
):
    return render(request, "product-galleries/create", {
        "products": product_service.options(db),
        "product_id": product_id,
    })


@router.post("")
def store(
    request: Request,
    product_id: Optional[int] = Form(None),
    order: Optional[int] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    data = validate_form(GalleryCreate, product_id=product_id, order=order)
    gallery_service.create(db, storage, data, file)
    flash(request, "Gallery image added successfully.")
    return redirect("/product-galleries")


@router.get("/{gallery_id}")
def show(request: Request, gallery_id: int, db: Session = Depends(get_db)):
    gallery = gallery_service.get(db, gallery_id)
    return render(request, "product-galleries/show", {"gallery": serialize(GalleryDetailResponse, gallery)})


@router.get("/{gallery_id}/edit")
def edit(request: Request, gallery_id: int, db: Session = Depends(get_db)):
    gallery = gallery_service.get(db, gallery_id)
    return render(request, "product-galleries/edit", {
        "gallery": serialize(GalleryDetailResponse, gallery),
        "products": product_service.options(db),
    })


# Browsers cannot send files with PUT, multipart edit forms POST here
@router.api_route("/{gallery_id}", methods=["PUT", "PATCH", "POST"])
def update(
    request: Request,
    gallery_id: int,
    product_id: Optional[int] = Form(None),
    order: Optional[int] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    gallery = gallery_service.get(db, gallery_id)
    data = validate_form(GalleryUpdate, product_id=product_id or "", order=order)
    gallery_service.update(db, storage, gallery, data, file)
    flash(request, "Gallery image updated successfully.")
    return redirect("/product-galleries")


@router.delete("/{gallery_id}")
def destroy(
    request: Request,
    gallery_id: int,
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    gallery = gallery_service.get(db, gallery_id)
    gallery_service.delete(db, storage, gallery)
    flash(request, "Gallery image deleted successfully.")
    return redirect("/product-galleries")
