"""
Banner service
"""
import logging
from typing import Optional, List
from fastapi import UploadFile
from sqlalchemy.orm import Session, joinedload
from catalog_admin.models.banner import Banner
from catalog_admin.models.supplier import Supplier
from catalog_admin.schemas.banner import BannerCreate, BannerUpdate, BannerReorderRequest
from catalog_admin.services.storage_service import PublicStorage, validate_image, has_upload
from catalog_admin.api.utils import (
    get_by_id, validate_fk, validate_unique, bulk_validate_ids,
    paginate_response, apply_filters, update_entity, reorder_rows
)

logger = logging.getLogger(__name__)

BANNER_DIRECTORY = "banners"
ORDER_TAKEN = "This order is already used by another banner of the supplier."


class BannerService:
    """Reads and writes of supplier banners"""

    def _query(self, db: Session):
        return db.query(Banner).options(joinedload(Banner.supplier))

    def list_page(
        self,
        db: Session,
        page: int = 1,
        page_size: int = 10,
        supplier_id: Optional[int] = None,
        is_active: Optional[bool] = None
    ) -> dict:
        query = apply_filters(
            self._query(db),
            (Banner.supplier_id, supplier_id),
            (Banner.is_active, is_active)
        )
        return paginate_response(query, page, page_size, (Banner.supplier_id, Banner.order))

    def list_all(
        self,
        db: Session,
        supplier_id: Optional[int] = None,
        is_active: Optional[bool] = None
    ) -> List[Banner]:
        query = apply_filters(
            self._query(db),
            (Banner.supplier_id, supplier_id),
            (Banner.is_active, is_active)
        )
        return query.order_by(Banner.supplier_id, Banner.order).all()

    def list_active(self, db: Session) -> List[Banner]:
        return self.list_all(db, is_active=True)

    def list_for_supplier(self, db: Session, supplier_id: int) -> List[Banner]:
        """Active banners of one supplier in display order"""
        return self._query(db).filter(
            Banner.supplier_id == supplier_id,
            Banner.is_active.is_(True)
        ).order_by(Banner.order).all()

    def get(self, db: Session, banner_id: int) -> Banner:
        return get_by_id(
            db, Banner, banner_id,
            error_message="Banner not found",
            options=[joinedload(Banner.supplier)]
        )

    def create(
        self,
        db: Session,
        storage: PublicStorage,
        data: BannerCreate,
        upload: Optional[UploadFile]
    ) -> Banner:
        validate_image(upload, "image", required=True)
        validate_fk(db, Supplier, data.supplier_id, "supplier_id")
        validate_unique(
            db, Banner, "order", data.order,
            scope={"supplier_id": data.supplier_id}, message=ORDER_TAKEN
        )

        banner = Banner(**data.model_dump())
        banner.image_path = storage.store(upload, BANNER_DIRECTORY)
        db.add(banner)
        db.commit()
        logger.info("Banner %s created for supplier %s at %s", banner.id, banner.supplier_id, banner.order)
        return self.get(db, banner.id)

    def update(
        self,
        db: Session,
        storage: PublicStorage,
        banner: Banner,
        data: BannerUpdate,
        upload: Optional[UploadFile] = None
    ) -> Banner:
        """Fields left out keep their value, a new image replaces the stored one"""
        validate_image(upload, "image", required=False)

        fields = data.model_fields_set
        if "supplier_id" in fields:
            validate_fk(db, Supplier, data.supplier_id, "supplier_id")

        supplier_id = data.supplier_id if data.supplier_id is not None else banner.supplier_id
        order = data.order if data.order is not None else banner.order
        if {"supplier_id", "order"} & fields:
            validate_unique(
                db, Banner, "order", order,
                scope={"supplier_id": supplier_id}, exclude_id=banner.id, message=ORDER_TAKEN
            )

        changes = data.model_dump(exclude_unset=True)

        if has_upload(upload):
            previous = banner.image_path
            changes["image_path"] = storage.store(upload, BANNER_DIRECTORY)
            storage.delete(previous)

        update_entity(db, banner, changes)
        return self.get(db, banner.id)

    def delete(self, db: Session, storage: PublicStorage, banner: Banner) -> None:
        image_path = banner.image_path
        logger.info("Deleting banner %s", banner.id)
        db.delete(banner)
        db.commit()
        storage.delete(image_path)

    def reorder(self, db: Session, payload: BannerReorderRequest) -> int:
        """Rows of other suppliers are left untouched"""
        validate_fk(db, Supplier, payload.supplier_id, "supplier_id")
        bulk_validate_ids(db, Banner, [item.id for item in payload.banners], "banners")
        return reorder_rows(
            db, Banner, payload.banners,
            scope=(Banner.supplier_id, payload.supplier_id)
        )


banner_service = BannerService()
