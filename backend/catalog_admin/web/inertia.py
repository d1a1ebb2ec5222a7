"""
Inertia-style page responses

Every web page is a page object {component, props, url, version}. A first
visit gets it inside the HTML shell (data-page attribute), later visits made
by the client with the X-Inertia header get the bare JSON.
"""
import json
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from catalog_admin.config import settings

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def shared_props(request: Request) -> Dict[str, Any]:
    """
    Props sent with every page

    flash and errors are read once from the session and then dropped.
    """
    user = getattr(request.state, "user", None)
    session = request.session if "session" in request.scope else {}

    return {
        "name": settings.PROJECT_NAME,
        "auth": {
            "user": {"id": user.id, "name": user.name, "email": user.email} if user else None
        },
        "flash": session.pop("flash", None) or {},
        "errors": session.pop("errors", None) or {},
    }


def page_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


def render(
    request: Request,
    component: str,
    props: Optional[Dict[str, Any]] = None,
    status_code: int = 200
):
    """
    Render a page component

    Usage:
        return render(request, "suppliers/index", {"suppliers": page})
    """
    page = {
        "component": component,
        "props": jsonable_encoder({**shared_props(request), **(props or {})}),
        "url": page_url(request),
        "version": settings.INERTIA_VERSION,
    }

    if request.headers.get("X-Inertia"):
        return JSONResponse(
            page,
            status_code=status_code,
            headers={"X-Inertia": "true", "Vary": "X-Inertia"}
        )

    return templates.TemplateResponse(
        request,
        "app.html",
        {"page": json.dumps(page), "title": settings.PROJECT_NAME},
        status_code=status_code
    )


def redirect(url: str) -> RedirectResponse:
    """303 so that the client follows with a GET after PUT/POST/DELETE"""
    return RedirectResponse(url, status_code=303)


def back(request: Request, fallback: str = "/") -> RedirectResponse:
    return redirect(request.headers.get("referer") or fallback)


def flash(request: Request, message: str, kind: str = "success") -> None:
    request.session["flash"] = {kind: message}


def serialize(schema, obj) -> Dict[str, Any]:
    """Dump a model instance (or page dict) through a response schema"""
    return schema.model_validate(obj, from_attributes=True).model_dump(mode="json")
