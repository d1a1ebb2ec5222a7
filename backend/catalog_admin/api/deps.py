from fastapi import Depends, Request, HTTPException
from sqlalchemy.orm import Session
from catalog_admin.database import get_db
from catalog_admin.core.exceptions import LoginRequired
from catalog_admin.models.user import User
from catalog_admin.services.storage_service import get_storage

__all__ = ["get_db", "get_storage", "get_current_user_id", "get_current_user", "get_web_user"]


def get_current_user_id(request: Request) -> int:
    """
    Extract user_id from the request context (set by the middleware)
    """
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return user_id


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> User:
    """
    Full User of the bearer token
    The user must still exist and be active
    """
    user = db.query(User).filter_by(id=user_id, is_active=True).first()

    if not user:
        raise HTTPException(
            status_code=401,
            detail="User not found or inactive",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return user


def get_web_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Logged in user of the web session

    Raises:
        LoginRequired, answered with a redirect to the login page
    """
    user_id = getattr(request.state, "user_id", None)
    user = db.query(User).filter_by(id=user_id, is_active=True).first() if user_id else None

    if not user:
        if "session" in request.scope:
            request.session.pop("user_id", None)
        raise LoginRequired()

    request.state.user = user
    return user
