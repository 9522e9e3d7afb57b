"""
Application configuration using Pydantic Settings
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Database
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "notebook_runner"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_POOL_SIZE: int = 5

    # Upstream notebook platform (Databricks)
    DATABRICKS_INSTANCE: Optional[str] = None
    DATABRICKS_TOKEN: Optional[str] = None
    DATABRICKS_CLUSTER_ID: Optional[str] = None
    DATABRICKS_RUN_NAME: str = "Triggered from MDC App"
    NOTEBOOK_PATH: Optional[str] = None

    # Auth
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # API
    API_HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]
    FRONTEND_DIST: str = "dist"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def database_url(self) -> str:
        """DATABASE_URL if set, otherwise an asyncpg URL built from the DB_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+asyncpg",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)

    def missing_upstream_settings(self) -> List[str]:
        """Names of the upstream settings that are not configured."""
        required = {
            "DATABRICKS_INSTANCE": self.DATABRICKS_INSTANCE,
            "DATABRICKS_TOKEN": self.DATABRICKS_TOKEN,
            "DATABRICKS_CLUSTER_ID": self.DATABRICKS_CLUSTER_ID,
            "NOTEBOOK_PATH": self.NOTEBOOK_PATH,
        }
        return [name for name, value in required.items() if not value]

    def missing_required_settings(self) -> List[str]:
        missing = self.missing_upstream_settings()
        if not self.JWT_SECRET:
            missing.append("JWT_SECRET")
        return missing


@lru_cache
def get_settings() -> Settings:
    return Settings()
