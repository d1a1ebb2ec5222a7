from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """
    Application settings
    Loaded from the environment and the .env file
    """
    # Database
    DATABASE_URL: str = "sqlite:///./catalog_admin.db"

    # JWT
    SECRET_KEY: str = "change-me-to-a-long-random-secret-of-at-least-32-chars"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days

    # API
    API_V1_STR: str = "/api/v1"
    PUBLIC_API_STR: str = "/api/public"
    PROJECT_NAME: str = "Catalog Admin"
    ENVIRONMENT: str = "development"

    # CORS (comma separated string or list)
    BACKEND_CORS_ORIGINS: Union[str, List[str]] = "http://localhost:5173,http://localhost:8000"

    # Public disk for uploaded images
    STORAGE_ROOT: str = "./storage/app/public"
    STORAGE_URL: str = "/storage"
    MAX_IMAGE_SIZE_KB: int = 2048

    # Listing
    DEFAULT_PAGE_SIZE: int = 10

    # Web UI
    INERTIA_VERSION: str = "1"
    SESSION_COOKIE: str = "catalog_admin_session"

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("BACKEND_CORS_ORIGINS", mode="after")
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS origins from string or list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
