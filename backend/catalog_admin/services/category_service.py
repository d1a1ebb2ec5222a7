"""
Product category service
"""
import logging
from typing import Optional, List
from sqlalchemy import func, desc
from sqlalchemy.orm import Session, joinedload
from catalog_admin.models.product_category import ProductCategory
from catalog_admin.models.product import Product
from catalog_admin.models.supplier import Supplier
from catalog_admin.schemas.product_category import (
    CategoryCreate, CategoryUpdate, CategoryReorderRequest
)
from catalog_admin.api.utils import (
    validate_fk, bulk_validate_ids, paginate_response,
    apply_search_filter, apply_filters, update_entity, reorder_rows
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Reads and writes of product categories"""

    def list_page(
        self,
        db: Session,
        page: int = 1,
        page_size: int = 10,
        supplier_id: Optional[int] = None,
        search: Optional[str] = None
    ) -> dict:
        """Sorted by order, then newest first, each one with products_count set"""
        query = db.query(ProductCategory, func.count(Product.id)).outerjoin(
            Product, Product.category_id == ProductCategory.id
        ).options(joinedload(ProductCategory.supplier)).group_by(ProductCategory.id)

        query = apply_filters(query, (ProductCategory.supplier_id, supplier_id))
        query = apply_search_filter(query, search, ProductCategory.name)

        return paginate_response(
            query, page, page_size,
            (ProductCategory.order, desc(ProductCategory.created_at), desc(ProductCategory.id)),
            transform_fn=self._with_count
        )

    def options(self, db: Session, supplier_id: Optional[int] = None) -> List[dict]:
        query = db.query(ProductCategory.id, ProductCategory.name, ProductCategory.supplier_id)
        if supplier_id is not None:
            query = query.filter(ProductCategory.supplier_id == supplier_id)
        rows = query.order_by(ProductCategory.name).all()
        return [{"id": row.id, "name": row.name, "supplier_id": row.supplier_id} for row in rows]

    def create(self, db: Session, data: CategoryCreate) -> ProductCategory:
        validate_fk(db, Supplier, data.supplier_id, "supplier_id")

        category = ProductCategory(**data.model_dump())
        db.add(category)
        db.commit()
        db.refresh(category)
        logger.info("Category %s created for supplier %s", category.id, category.supplier_id)
        return category

    def update(self, db: Session, category: ProductCategory, data: CategoryUpdate) -> ProductCategory:
        if "supplier_id" in data.model_fields_set:
            validate_fk(db, Supplier, data.supplier_id, "supplier_id")
        return update_entity(db, category, data)

    def delete(self, db: Session, category: ProductCategory) -> None:
        """Products of the category keep existing with category_id set to NULL"""
        logger.info("Deleting category %s", category.id)
        db.delete(category)
        db.commit()

    def reorder(self, db: Session, payload: CategoryReorderRequest) -> int:
        """Categories have no parent scope, every listed row is written"""
        bulk_validate_ids(db, ProductCategory, [item.id for item in payload.categories], "categories")
        return reorder_rows(db, ProductCategory, payload.categories)

    def count_products(self, db: Session, category: ProductCategory) -> ProductCategory:
        category.products_count = db.query(func.count(Product.id)).filter(
            Product.category_id == category.id
        ).scalar()
        return category

    @staticmethod
    def _with_count(row) -> ProductCategory:
        category, products_count = row
        category.products_count = products_count
        return category


category_service = CategoryService()
