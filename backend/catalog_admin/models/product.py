from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from catalog_admin.models.base import Base, TimestampMixin


class Product(Base, TimestampMixin):
    """
    Products of the catalog

    supplier_id is stored on the product even when the category already
    points at the same supplier, so products can be filtered without a join.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    supplier_id = Column(Integer, ForeignKey('suppliers.id', ondelete='CASCADE'), nullable=False)
    category_id = Column(Integer, ForeignKey('product_categories.id', ondelete='SET NULL'), nullable=True)

    supplier = relationship("Supplier", back_populates="products")
    category = relationship("ProductCategory", back_populates="products")

    # Always read in display order
    galleries = relationship(
        "ProductGallery",
        back_populates="product",
        order_by="[ProductGallery.order, ProductGallery.id]",
        cascade="all, delete",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Product {self.name}>"

    __table_args__ = (
        Index('idx_products_supplier', 'supplier_id'),
        Index('idx_products_category', 'category_id'),
        Index('idx_products_name', 'name'),
    )
