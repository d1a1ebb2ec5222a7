from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from catalog_admin.api.deps import get_db, get_current_user
from catalog_admin.models.user import User
from catalog_admin.schemas.user import UserLogin, Token, UserResponse
from catalog_admin.services.auth_service import authenticate, issue_token

router = APIRouter()


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """
    User authentication

    Flow:
    1. Look the active user up by email
    2. Check the password
    3. Issue a JWT carrying user_id
    """
    user = authenticate(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="These credentials do not match our records.",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return {
        "access_token": issue_token(user),
        "token_type": "bearer",
        "user": user
    }


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    """User of the bearer token"""
    return current_user
