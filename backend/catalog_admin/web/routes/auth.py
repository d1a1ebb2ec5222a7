"""
Web login and logout (session cookie)
"""
import logging
from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session
from typing import Optional
from catalog_admin.api.deps import get_db
from catalog_admin.core.exceptions import ValidationFailed, validate_form
from catalog_admin.schemas.user import UserLogin
from catalog_admin.services.auth_service import authenticate
from catalog_admin.web.inertia import render, redirect

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/login")
def login_page(request: Request):
    if request.state.user_id:
        return redirect("/dashboard")
    return render(request, "auth/login")


@router.post("/login")
def login(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    credentials = validate_form(UserLogin, email=email, password=password)

    user = authenticate(db, credentials.email, credentials.password)
    if not user:
        raise ValidationFailed.single("email", "These credentials do not match our records.")

    request.session.clear()
    request.session["user_id"] = user.id
    logger.info("User %s logged in", user.id)
    return redirect("/dashboard")


@router.post("/logout")
def logout(request: Request):
    request.session.clear()
    return redirect("/")
