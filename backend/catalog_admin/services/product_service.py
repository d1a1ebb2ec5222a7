"""
Product service
"""
import logging
from typing import Optional, List
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload, selectinload
from catalog_admin.models.product import Product
from catalog_admin.models.product_category import ProductCategory
from catalog_admin.models.supplier import Supplier
from catalog_admin.schemas.product import ProductCreate, ProductUpdate
from catalog_admin.api.utils import (
    get_by_id, validate_fk, paginate_response,
    apply_search_filter, apply_filters, update_entity
)

logger = logging.getLogger(__name__)

# Everything a product response embeds
PRODUCT_LOADS = [
    joinedload(Product.supplier),
    joinedload(Product.category),
    selectinload(Product.galleries),
]


class ProductService:
    """Reads and writes of products"""

    def _query(self, db: Session):
        return db.query(Product).options(*PRODUCT_LOADS)

    def list_page(
        self,
        db: Session,
        page: int = 1,
        page_size: int = 10,
        supplier_id: Optional[int] = None,
        category_id: Optional[int] = None,
        search: Optional[str] = None
    ) -> dict:
        query = apply_filters(
            self._query(db),
            (Product.supplier_id, supplier_id),
            (Product.category_id, category_id)
        )
        query = apply_search_filter(query, search, Product.name)

        return paginate_response(query, page, page_size, (desc(Product.created_at), desc(Product.id)))

    def list_public(
        self,
        db: Session,
        supplier_id: Optional[int] = None,
        category_id: Optional[int] = None
    ) -> List[Product]:
        """Unpaginated catalog read by the storefront"""
        query = apply_filters(
            self._query(db),
            (Product.supplier_id, supplier_id),
            (Product.category_id, category_id)
        )
        return query.order_by(Product.id).all()

    def get(self, db: Session, product_id: int) -> Product:
        return get_by_id(db, Product, product_id, options=PRODUCT_LOADS)

    def options(self, db: Session) -> List[dict]:
        rows = db.query(Product.id, Product.name).order_by(Product.name).all()
        return [{"id": row.id, "name": row.name} for row in rows]

    def _validate_relations(self, db: Session, supplier_id: Optional[int], category_id: Optional[int]) -> None:
        if supplier_id is not None:
            validate_fk(db, Supplier, supplier_id, "supplier_id")
        if category_id is not None:
            validate_fk(db, ProductCategory, category_id, "category_id")

    def create(self, db: Session, data: ProductCreate) -> Product:
        validate_fk(db, Supplier, data.supplier_id, "supplier_id")
        self._validate_relations(db, None, data.category_id)

        product = Product(**data.model_dump())
        db.add(product)
        db.commit()
        logger.info("Product %s created for supplier %s", product.id, product.supplier_id)
        return self.get(db, product.id)

    def update(self, db: Session, product: Product, data: ProductUpdate) -> Product:
        fields = data.model_fields_set
        if "supplier_id" in fields:
            validate_fk(db, Supplier, data.supplier_id, "supplier_id")
        # category_id may be cleared with null
        if "category_id" in fields:
            self._validate_relations(db, None, data.category_id)

        update_entity(db, product, data)
        return self.get(db, product.id)

    def delete(self, db: Session, product: Product) -> None:
        """Gallery rows follow through ON DELETE CASCADE, their files stay on disk"""
        logger.info("Deleting product %s", product.id)
        db.delete(product)
        db.commit()


product_service = ProductService()
