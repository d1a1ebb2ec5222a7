"""
Dashboard figures shared by the web page and the JSON API
"""
from sqlalchemy import func, desc
from sqlalchemy.orm import Session
from catalog_admin.models.supplier import Supplier
from catalog_admin.models.product_category import ProductCategory
from catalog_admin.models.product import Product
from catalog_admin.models.product_gallery import ProductGallery

TOP_LIMIT = 5
LIST_LIMIT = 10


class DashboardService:

    def stats(self, db: Session) -> dict:
        return {
            "products": db.query(func.count(Product.id)).scalar(),
            "suppliers": db.query(func.count(Supplier.id)).scalar(),
            "categories": db.query(func.count(ProductCategory.id)).scalar(),
            "galleries": db.query(func.count(ProductGallery.id)).scalar(),
        }

    def products_by_supplier(self, db: Session) -> list:
        """Top suppliers by number of products, for the bar chart"""
        products_count = func.count(Product.id).label("products_count")
        rows = db.query(Supplier.name, products_count).outerjoin(
            Product, Product.supplier_id == Supplier.id
        ).group_by(Supplier.id, Supplier.name).order_by(
            desc(products_count), Supplier.id
        ).limit(TOP_LIMIT).all()
        return [{"name": row.name, "count": row.products_count} for row in rows]

    def products_by_category(self, db: Session) -> list:
        """Top categories by number of products, for the pie chart"""
        products_count = func.count(Product.id).label("products_count")
        rows = db.query(ProductCategory.name, products_count).outerjoin(
            Product, Product.category_id == ProductCategory.id
        ).group_by(ProductCategory.id, ProductCategory.name).order_by(
            desc(products_count), ProductCategory.id
        ).limit(TOP_LIMIT).all()
        return [{"name": row.name, "count": row.products_count} for row in rows]

    def recent_products(self, db: Session) -> list:
        rows = db.query(Product.id, Product.name, Product.created_at, Supplier.name.label("supplier")).join(
            Supplier, Product.supplier_id == Supplier.id
        ).order_by(desc(Product.created_at), desc(Product.id)).limit(TOP_LIMIT).all()
        return [
            {"id": row.id, "name": row.name, "supplier": row.supplier, "created_at": row.created_at}
            for row in rows
        ]

    def all_categories(self, db: Session) -> list:
        products_count = func.count(Product.id).label("products_count")
        rows = db.query(
            ProductCategory.id, ProductCategory.name, Supplier.name.label("supplier"), products_count
        ).join(
            Supplier, ProductCategory.supplier_id == Supplier.id
        ).outerjoin(
            Product, Product.category_id == ProductCategory.id
        ).group_by(
            ProductCategory.id, ProductCategory.name, Supplier.name
        ).order_by(ProductCategory.name).limit(LIST_LIMIT).all()
        return [
            {"id": row.id, "name": row.name, "supplier": row.supplier, "products_count": row.products_count}
            for row in rows
        ]

    def all_products(self, db: Session) -> list:
        rows = db.query(Product.id, Product.name, Supplier.name.label("supplier")).join(
            Supplier, Product.supplier_id == Supplier.id
        ).order_by(Product.name).limit(LIST_LIMIT).all()
        return [{"id": row.id, "name": row.name, "supplier": row.supplier} for row in rows]

    def summary(self, db: Session) -> dict:
        return {
            "stats": self.stats(db),
            "productsBySupplier": self.products_by_supplier(db),
            "productsByCategory": self.products_by_category(db),
            "recentProducts": self.recent_products(db),
            "allCategories": self.all_categories(db),
            "allProducts": self.all_products(db),
        }


dashboard_service = DashboardService()
