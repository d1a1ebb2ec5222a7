import logging
from typing import Optional
from sqlalchemy.orm import Session
from catalog_admin.core.security import verify_password, create_access_token
from catalog_admin.models.user import User

logger = logging.getLogger(__name__)


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """
    Active user matching the credentials, None when they do not match
    """
    user = db.query(User).filter_by(email=email.strip().lower(), is_active=True).first()

    if not user or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %s", email)
        return None

    return user


def issue_token(user: User) -> str:
    """Bearer token for the JSON API"""
    return create_access_token(user.id, email=user.email)
