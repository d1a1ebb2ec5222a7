"""
Product gallery routes

Create and update take multipart form data, the image comes in the
`file` part.
"""
from fastapi import APIRouter, Depends, Query, Form, File, UploadFile
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db, get_storage
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.core.exceptions import validate_form
from catalog_admin.schemas.product_gallery import (
    GalleryCreate,
    GalleryUpdate,
    GalleryDetailResponse,
    GalleryListResponse
)
from catalog_admin.services.gallery_service import gallery_service
from catalog_admin.services.storage_service import PublicStorage

router = APIRouter()


@router.post("/", response_model=GalleryDetailResponse, status_code=201)
def create_gallery(
    product_id: Optional[int] = Form(None),
    order: Optional[int] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    """Add an image to a product gallery"""
    data = validate_form(GalleryCreate, product_id=product_id, order=order)
    return gallery_service.create(db, storage, data, file)


@router.get("/", response_model=GalleryListResponse)
def list_galleries(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
    product_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    db: Session = Depends(get_db)
):
    """List gallery images by position"""
    return gallery_service.list_page(db, page, page_size, product_id)


@router.get("/{gallery_id}", response_model=GalleryDetailResponse)
def get_gallery(
    gallery_id: int,
    db: Session = Depends(get_db)
):
    return gallery_service.get(db, gallery_id)


@router.put("/{gallery_id}", response_model=GalleryDetailResponse)
def update_gallery(
    gallery_id: int,
    product_id: Optional[int] = Form(None),
    order: Optional[int] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    """Move an image or replace its file, the old file is removed"""
    gallery = gallery_service.get(db, gallery_id)
    data = validate_form(GalleryUpdate, product_id=product_id, order=order)
    return gallery_service.update(db, storage, gallery, data, file)


@router.delete("/{gallery_id}", status_code=204)
def delete_gallery(
    gallery_id: int,
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    gallery = gallery_service.get(db, gallery_id)
    gallery_service.delete(db, storage, gallery)
    return None
