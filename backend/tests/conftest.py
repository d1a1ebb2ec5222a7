"""
pytest configuration - shared fixtures
"""
import io
import sys
import os
import tempfile
from typing import Generator

# Settings are read at import time, point them away from the real database and disk
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="catalog-admin-storage-"))
os.environ.setdefault("ENVIRONMENT", "testing")

# Add backend directory to sys.path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from catalog_admin.database import Base
from catalog_admin.main import app
from catalog_admin.api.deps import get_db, get_storage
from catalog_admin.core.security import hash_password, create_access_token
from catalog_admin.services.storage_service import PublicStorage
from catalog_admin.models import User, Supplier, ProductCategory, Product, ProductGallery, Banner

USER_EMAIL = "admin@catalog.io"
USER_PASSWORD = "secret-password"


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """In-memory SQLite database, one connection shared with the app"""
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def storage(tmp_path) -> PublicStorage:
    return PublicStorage(str(tmp_path / "public"), "/storage")


@pytest.fixture
def client(test_db, storage) -> Generator[TestClient, None, None]:
    def _get_db():
        yield test_db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user(test_db) -> User:
    user = User(name="Admin", email=USER_EMAIL, password_hash=hash_password(USER_PASSWORD), is_active=True)
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture
def auth_headers(user) -> dict:
    token = create_access_token(user.id, email=user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api(client, auth_headers) -> TestClient:
    """Client authenticated against the JSON API"""
    client.headers.update(auth_headers)
    return client


@pytest.fixture
def web(client, user) -> TestClient:
    """Client logged in to the web UI through the session cookie"""
    response = client.post(
        "/login",
        data={"email": USER_EMAIL, "password": USER_PASSWORD},
        follow_redirects=False
    )
    assert response.status_code == 303
    return client


# ============ FACTORIES ============

@pytest.fixture
def make_supplier(test_db):
    def _make(name="Acme Supplies", description=None) -> Supplier:
        supplier = Supplier(name=name, description=description)
        test_db.add(supplier)
        test_db.commit()
        return supplier
    return _make


@pytest.fixture
def make_category(test_db):
    def _make(supplier, name="Headphones", order=0) -> ProductCategory:
        category = ProductCategory(name=name, supplier_id=supplier.id, order=order)
        test_db.add(category)
        test_db.commit()
        return category
    return _make


@pytest.fixture
def make_product(test_db):
    def _make(supplier, name="Wireless Headphones", category=None) -> Product:
        product = Product(
            name=name,
            supplier_id=supplier.id,
            category_id=category.id if category else None
        )
        test_db.add(product)
        test_db.commit()
        return product
    return _make


@pytest.fixture
def make_gallery(test_db):
    def _make(product, order, file_path=None) -> ProductGallery:
        gallery = ProductGallery(
            product_id=product.id,
            order=order,
            file_path=file_path or f"product-galleries/{product.id}-{order}.png"
        )
        test_db.add(gallery)
        test_db.commit()
        return gallery
    return _make


@pytest.fixture
def make_banner(test_db):
    def _make(supplier, order, title=None, is_active=True, image_path=None) -> Banner:
        banner = Banner(
            title=title or f"Banner {order}",
            supplier_id=supplier.id,
            order=order,
            is_active=is_active,
            image_path=image_path or f"banners/{supplier.id}-{order}.png"
        )
        test_db.add(banner)
        test_db.commit()
        return banner
    return _make


def png_bytes(size=(2, 2)) -> bytes:
    """A real PNG so uploads pass content verification"""
    buffer = io.BytesIO()
    Image.new("RGB", size, (200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


def image_file(name="photo.png", content=None, content_type="image/png"):
    """Multipart tuple for TestClient files="""
    return (name, png_bytes() if content is None else content, content_type)
