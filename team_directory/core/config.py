# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Centralised settings — read from env vars once."""
import os

from team_directory import __version__


class Settings:
    SERVICE_NAME: str = "team-directory"
    SERVICE_VERSION: str = __version__
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./team_directory.db")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))
    CREATE_TABLES: bool = os.getenv("CREATE_TABLES", "true").lower() in {"1", "true", "yes"}
    CORS_ORIGINS: list[str] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]
    PORT: int = int(os.getenv("PORT", "8080"))


settings = Settings()
