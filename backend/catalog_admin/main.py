import logging
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from catalog_admin.config import settings
from catalog_admin.database import init_db
from catalog_admin.core.exceptions import ValidationFailed, LoginRequired, errors_from_pydantic
from catalog_admin.middleware.auth_middleware import AuthMiddleware, is_api_path
from catalog_admin.api.deps import get_current_user, get_web_user
from catalog_admin.api.routes import (
    auth, suppliers, product_categories, products, product_galleries, banners, dashboard, public
)
from catalog_admin.services.storage_service import storage
from catalog_admin.web.inertia import back, redirect
from catalog_admin.web.routes import (
    auth as web_auth, pages,
    suppliers as web_suppliers,
    product_categories as web_categories,
    products as web_products,
    product_galleries as web_galleries,
    banners as web_banners,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Middlewares run in reverse order of registration: CORS, session, auth
app.add_middleware(AuthMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    same_site="lax",
    https_only=settings.ENVIRONMENT == "production"
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Uploaded images
app.mount(settings.STORAGE_URL, StaticFiles(directory=str(storage.root)), name="storage")


# ============ ERROR HANDLERS ============

def _validation_response(request: Request, errors: dict, message: str):
    """422 JSON for the API, redirect back with the errors for the web UI"""
    if is_api_path(request.url.path):
        return JSONResponse(status_code=422, content={"message": message, "errors": errors})

    request.session["errors"] = errors
    return back(request)


@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    return _validation_response(request, exc.errors, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = errors_from_pydantic(exc.errors())
    return _validation_response(request, errors, ValidationFailed(errors).message)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    return redirect("/login")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# Health check route
@app.get("/health")
def health_check():
    """Health check for monitoring"""
    return {"status": "healthy", "environment": settings.ENVIRONMENT}


# JSON API
api_auth = [Depends(get_current_user)]

app.include_router(auth.router, prefix=f"{settings.API_V1_STR}/auth", tags=["auth"])
app.include_router(suppliers.router, prefix=f"{settings.API_V1_STR}/suppliers", tags=["suppliers"], dependencies=api_auth)
app.include_router(product_categories.router, prefix=f"{settings.API_V1_STR}/product-categories", tags=["product-categories"], dependencies=api_auth)
app.include_router(products.router, prefix=f"{settings.API_V1_STR}/products", tags=["products"], dependencies=api_auth)
app.include_router(product_galleries.router, prefix=f"{settings.API_V1_STR}/product-galleries", tags=["product-galleries"], dependencies=api_auth)
app.include_router(banners.router, prefix=f"{settings.API_V1_STR}/banners", tags=["banners"], dependencies=api_auth)
app.include_router(dashboard.router, prefix=f"{settings.API_V1_STR}/dashboard", tags=["dashboard"], dependencies=api_auth)
app.include_router(public.router, prefix=settings.PUBLIC_API_STR, tags=["public"])

# Web UI
web_auth_deps = [Depends(get_web_user)]

app.include_router(pages.router, include_in_schema=False)
app.include_router(web_auth.router, include_in_schema=False)
app.include_router(web_suppliers.router, prefix="/suppliers", dependencies=web_auth_deps, include_in_schema=False)
app.include_router(web_categories.router, prefix="/product-categories", dependencies=web_auth_deps, include_in_schema=False)
app.include_router(web_products.router, prefix="/products", dependencies=web_auth_deps, include_in_schema=False)
app.include_router(web_galleries.router, prefix="/product-galleries", dependencies=web_auth_deps, include_in_schema=False)
app.include_router(web_banners.router, prefix="/banners", dependencies=web_auth_deps, include_in_schema=False)


@app.on_event("startup")
def startup_event():
    logger.info("%s starting (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
    init_db()
    logger.info("Database tables created/verified")
    logger.info("Serving uploads from %s under %s", storage.root, settings.STORAGE_URL)
