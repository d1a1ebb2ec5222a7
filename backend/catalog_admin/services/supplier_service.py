"""
Supplier service
Listing with product counts and CRUD writes
"""
import logging
from typing import Optional, List
from sqlalchemy import func, desc
from sqlalchemy.orm import Session
from catalog_admin.models.supplier import Supplier
from catalog_admin.models.product import Product
from catalog_admin.schemas.supplier import SupplierCreate, SupplierUpdate
from catalog_admin.api.utils import paginate_response, apply_search_filter, update_entity

logger = logging.getLogger(__name__)


class SupplierService:
    """Reads and writes of suppliers"""

    def list_page(
        self,
        db: Session,
        page: int = 1,
        page_size: int = 10,
        search: Optional[str] = None
    ) -> dict:
        """Newest suppliers first, each one with products_count set"""
        query = db.query(Supplier, func.count(Product.id)).outerjoin(
            Product, Product.supplier_id == Supplier.id
        ).group_by(Supplier.id)
        query = apply_search_filter(query, search, Supplier.name)

        return paginate_response(
            query, page, page_size,
            (desc(Supplier.created_at), desc(Supplier.id)),
            transform_fn=self._with_count
        )

    def options(self, db: Session) -> List[dict]:
        """(id, name) pairs for select inputs"""
        rows = db.query(Supplier.id, Supplier.name).order_by(Supplier.name).all()
        return [{"id": row.id, "name": row.name} for row in rows]

    def create(self, db: Session, data: SupplierCreate) -> Supplier:
        supplier = Supplier(**data.model_dump())
        db.add(supplier)
        db.commit()
        db.refresh(supplier)
        logger.info("Supplier %s created", supplier.id)
        return supplier

    def update(self, db: Session, supplier: Supplier, data: SupplierUpdate) -> Supplier:
        return update_entity(db, supplier, data)

    def delete(self, db: Session, supplier: Supplier) -> None:
        """Categories, products and banners follow through ON DELETE CASCADE"""
        logger.info("Deleting supplier %s", supplier.id)
        db.delete(supplier)
        db.commit()

    def count_products(self, db: Session, supplier: Supplier) -> Supplier:
        supplier.products_count = db.query(func.count(Product.id)).filter(
            Product.supplier_id == supplier.id
        ).scalar()
        return supplier

    @staticmethod
    def _with_count(row) -> Supplier:
        supplier, products_count = row
        supplier.products_count = products_count
        return supplier


supplier_service = SupplierService()
