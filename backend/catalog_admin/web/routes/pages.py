from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from catalog_admin.api.deps import get_db, get_web_user
from catalog_admin.models.user import User
from catalog_admin.services.dashboard_service import dashboard_service
from catalog_admin.web.inertia import render

router = APIRouter()


@router.get("/")
def home(request: Request):
    """Public welcome page"""
    return render(request, "welcome", {"canRegister": False})


@router.get("/dashboard")
def dashboard(
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(get_web_user)
):
    return render(request, "dashboard", dashboard_service.summary(db))
