from sqlalchemy import Column, Integer, String, Boolean
from catalog_admin.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    Back-office users

    Only used to authenticate against the web UI and the JSON API
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)  # bcrypt hash

    is_active = Column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<User {self.name} ({self.email})>"
