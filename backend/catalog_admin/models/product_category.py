from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from catalog_admin.models.base import Base, TimestampMixin


class ProductCategory(Base, TimestampMixin):
    """
    Product categories, each one owned by a supplier
    """
    __tablename__ = "product_categories"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    supplier_id = Column(Integer, ForeignKey('suppliers.id', ondelete='CASCADE'), nullable=False)

    # Display position, changed by the reorder endpoint
    order = Column(Integer, nullable=False, default=0)

    supplier = relationship("Supplier", back_populates="categories")
    products = relationship("Product", back_populates="category", passive_deletes=True)

    def __repr__(self):
        return f"<ProductCategory {self.name}>"

    __table_args__ = (
        Index('idx_product_categories_supplier', 'supplier_id'),
        Index('idx_product_categories_order', 'order'),
    )
