"""
Catalog models

Supplier is the root of the catalog: categories, products and banners hang
from it, product galleries hang from products.
"""

from catalog_admin.models.base import Base, TimestampMixin
from catalog_admin.models.user import User
from catalog_admin.models.supplier import Supplier
from catalog_admin.models.product_category import ProductCategory
from catalog_admin.models.product import Product
from catalog_admin.models.product_gallery import ProductGallery
from catalog_admin.models.banner import Banner

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Supplier",
    "ProductCategory",
    "Product",
    "ProductGallery",
    "Banner",
]
