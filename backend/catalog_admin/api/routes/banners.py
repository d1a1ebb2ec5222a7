"""
Banner routes

Create and update take multipart form data, the picture comes in the
`image` part.
"""
from fastapi import APIRouter, Depends, Query, Form, File, UploadFile
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db, get_storage
from catalog_admin.config import settings
from catalog_admin.schemas.common import MAX_ROW_ID
from catalog_admin.core.exceptions import validate_form
from catalog_admin.schemas.common import ReorderResponse
from catalog_admin.schemas.banner import (
    BannerCreate,
    BannerUpdate,
    BannerResponse,
    BannerListResponse,
    BannerReorderRequest
)
from catalog_admin.services.banner_service import banner_service
from catalog_admin.services.storage_service import PublicStorage

router = APIRouter()


@router.post("/", response_model=BannerResponse, status_code=201)
def create_banner(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    supplier_id: Optional[int] = Form(None),
    is_active: Optional[bool] = Form(None),
    order: Optional[int] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    """Create a banner for a supplier"""
    data = validate_form(
        BannerCreate,
        title=title, description=description, supplier_id=supplier_id,
        is_active=is_active, order=order
    )
    return banner_service.create(db, storage, data, image)


@router.get("/", response_model=BannerListResponse)
def list_banners(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
    supplier_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    is_active: Optional[bool] = Query(None),
    db: Session = Depends(get_db)
):
    """List banners grouped by supplier, in display order"""
    return banner_service.list_page(db, page, page_size, supplier_id, is_active)


@router.post("/reorder", response_model=ReorderResponse)
def reorder_banners(
    payload: BannerReorderRequest,
    db: Session = Depends(get_db)
):
    """
    Save new positions for the banners of one supplier

    Banners of other suppliers are skipped.
    """
    updated = banner_service.reorder(db, payload)
    return {"message": "Banner order updated successfully.", "updated": updated}


@router.get("/{banner_id}", response_model=BannerResponse)
def get_banner(
    banner_id: int,
    db: Session = Depends(get_db)
):
    return banner_service.get(db, banner_id)


@router.put("/{banner_id}", response_model=BannerResponse)
def update_banner(
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
    """Update a banner, a new image replaces the stored one"""
    banner = banner_service.get(db, banner_id)
    data = validate_form(
        BannerUpdate,
        title=title, description=description, supplier_id=supplier_id,
        is_active=is_active, order=order
    )
    return banner_service.update(db, storage, banner, data, image)


@router.delete("/{banner_id}", status_code=204)
def delete_banner(
    banner_id: int,
    db: Session = Depends(get_db),
    storage: PublicStorage = Depends(get_storage)
):
    banner = banner_service.get(db, banner_id)
    banner_service.delete(db, storage, banner)
    return None
