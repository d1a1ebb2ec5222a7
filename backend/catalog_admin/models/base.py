from sqlalchemy import Column, DateTime
from datetime import datetime
from catalog_admin.config import settings
from catalog_admin.database import Base


class TimestampMixin:
    """
    Time audit columns
    Every table gets created_at and updated_at
    """
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


def public_url(path):
    """URL under which a file stored on the public disk is served"""
    if not path:
        return None
    return f"{settings.STORAGE_URL.rstrip('/')}/{path.lstrip('/')}"


# Base is defined in database.py
# Re-exported here for convenience
__all__ = ['Base', 'TimestampMixin', 'public_url']
