"""
Product gallery service

Each row points at an image on the public disk. The file and the row are
written separately, a failed commit can leave an orphan file behind.
"""
import logging
from typing import Optional
from fastapi import UploadFile
from sqlalchemy.orm import Session, joinedload
from catalog_admin.models.product import Product
from catalog_admin.models.product_gallery import ProductGallery
from catalog_admin.schemas.product_gallery import GalleryCreate, GalleryUpdate, GalleryReorderRequest
from catalog_admin.services.storage_service import PublicStorage, validate_image, has_upload
from catalog_admin.api.utils import (
    get_by_id, validate_fk, validate_unique, bulk_validate_ids,
    paginate_response, apply_filters, update_entity, reorder_rows
)

logger = logging.getLogger(__name__)

GALLERY_DIRECTORY = "product-galleries"
ORDER_TAKEN = "This order is already used by another image of the product."


class GalleryService:
    """Reads and writes of product gallery images"""

    def list_page(
        self,
        db: Session,
        page: int = 1,
        page_size: int = 10,
        product_id: Optional[int] = None
    ) -> dict:
        query = db.query(ProductGallery).options(joinedload(ProductGallery.product))
        query = apply_filters(query, (ProductGallery.product_id, product_id))
        return paginate_response(query, page, page_size, (ProductGallery.order, ProductGallery.id))

    def get(self, db: Session, gallery_id: int) -> ProductGallery:
        return get_by_id(
            db, ProductGallery, gallery_id,
            error_message="Gallery image not found",
            options=[joinedload(ProductGallery.product)]
        )

    def create(
        self,
        db: Session,
        storage: PublicStorage,
        data: GalleryCreate,
        upload: Optional[UploadFile]
    ) -> ProductGallery:
        validate_image(upload, "file", required=True)
        validate_fk(db, Product, data.product_id, "product_id")
        validate_unique(
            db, ProductGallery, "order", data.order,
            scope={"product_id": data.product_id}, message=ORDER_TAKEN
        )

        file_path = storage.store(upload, GALLERY_DIRECTORY)
        gallery = ProductGallery(product_id=data.product_id, order=data.order, file_path=file_path)
        db.add(gallery)
        db.commit()
        logger.info("Gallery image %s added to product %s at %s", gallery.id, gallery.product_id, gallery.order)
        return self.get(db, gallery.id)

    def update(
        self,
        db: Session,
        storage: PublicStorage,
        gallery: ProductGallery,
        data: GalleryUpdate,
        upload: Optional[UploadFile] = None
    ) -> ProductGallery:
        """
        Move an image to another product or position, or replace its file

        The uniqueness check runs against the target product and order,
        skipping the image itself.
        """
        validate_image(upload, "file", required=False)
        validate_fk(db, Product, data.product_id, "product_id")

        order = data.order if data.order is not None else gallery.order
        validate_unique(
            db, ProductGallery, "order", order,
            scope={"product_id": data.product_id}, exclude_id=gallery.id, message=ORDER_TAKEN
        )

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if has_upload(upload):
            previous = gallery.file_path
            changes["file_path"] = storage.store(upload, GALLERY_DIRECTORY)
            storage.delete(previous)

        update_entity(db, gallery, changes)
        return self.get(db, gallery.id)

    def delete(self, db: Session, storage: PublicStorage, gallery: ProductGallery) -> None:
        file_path = gallery.file_path
        logger.info("Deleting gallery image %s", gallery.id)
        db.delete(gallery)
        db.commit()
        storage.delete(file_path)

    def reorder(self, db: Session, product_id: int, payload: GalleryReorderRequest) -> int:
        """
        Write new positions for the images of one product

        Raises:
            HTTPException 404 when the product does not exist
            ValidationFailed when a listed image does not exist
        """
        product = get_by_id(db, Product, product_id, error_message="Product not found")
        bulk_validate_ids(db, ProductGallery, [item.id for item in payload.galleries], "galleries")
        return reorder_rows(
            db, ProductGallery, payload.galleries,
            scope=(ProductGallery.product_id, product.id)
        )


gallery_service = GalleryService()
