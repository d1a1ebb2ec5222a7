from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from catalog_admin.models.base import Base, TimestampMixin, public_url


class Banner(Base, TimestampMixin):
    """
    Promotional banners shown per supplier

    order is scoped to the supplier, like galleries are scoped to a product.
    """
    __tablename__ = "banners"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image_path = Column(String(255), nullable=True)  # Relative to the public disk

    supplier_id = Column(Integer, ForeignKey('suppliers.id', ondelete='CASCADE'), nullable=False)

    is_active = Column(Boolean, default=True, nullable=False)
    order = Column(Integer, nullable=False, default=1)

    supplier = relationship("Supplier", back_populates="banners")

    @property
    def image_url(self):
        return public_url(self.image_path)

    def __repr__(self):
        return f"<Banner {self.title}>"

    __table_args__ = (
        Index('idx_banners_supplier_order', 'supplier_id', 'order'),
        Index('idx_banners_active', 'is_active'),
    )
