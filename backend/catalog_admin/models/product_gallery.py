from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from catalog_admin.models.base import Base, TimestampMixin, public_url


class ProductGallery(Base, TimestampMixin):
    """
    One image of a product gallery

    order is meant to be unique per product. It is only checked when a row
    is written, never enforced by a constraint.
    """
    __tablename__ = "product_galleries"

    id = Column(Integer, primary_key=True, index=True)

    file_path = Column(String(255), nullable=False)  # Relative to the public disk
    product_id = Column(Integer, ForeignKey('products.id', ondelete='CASCADE'), nullable=False)
    order = Column(Integer, nullable=False, default=1)

    product = relationship("Product", back_populates="galleries")

    @property
    def file_url(self):
        return public_url(self.file_path)

    def __repr__(self):
        return f"<ProductGallery {self.product_id}#{self.order}>"

    __table_args__ = (
        Index('idx_product_galleries_product_order', 'product_id', 'order'),
    )
