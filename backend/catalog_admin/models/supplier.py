from sqlalchemy import Column, Integer, String, Text, Index
from sqlalchemy.orm import relationship
from catalog_admin.models.base import Base, TimestampMixin


class Supplier(Base, TimestampMixin):
    """
    Suppliers own the rest of the catalog

    A supplier has:
    - product categories
    - products (also referenced directly, not only through the category)
    - promotional banners
    """
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Children go away with the supplier (ON DELETE CASCADE on their foreign keys)
    categories = relationship("ProductCategory", back_populates="supplier", cascade="all, delete", passive_deletes=True)
    products = relationship("Product", back_populates="supplier", cascade="all, delete", passive_deletes=True)
    banners = relationship(
        "Banner",
        back_populates="supplier",
        order_by="Banner.order",
        cascade="all, delete",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Supplier {self.name}>"

    __table_args__ = (
        Index('idx_suppliers_name', 'name'),
    )
