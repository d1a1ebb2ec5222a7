import sqlite3
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from catalog_admin.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

# SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
    echo=False
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base for the models
Base = declarative_base()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """SQLite ignores ON DELETE rules unless foreign keys are switched on per connection"""
    if isinstance(dbapi_conn, sqlite3.Connection):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db():
    """
    Create every table registered on the metadata
    """
    from catalog_admin.models import (  # noqa: F401
        user, supplier, product_category, product, product_gallery, banner
    )
    Base.metadata.create_all(bind=engine)


def get_db():
    """
    Dependency that yields a database session
    Used with FastAPI Depends
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
