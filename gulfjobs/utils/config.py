from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Data backend: "supabase" (PostgREST over HTTP) or "database" (SQLAlchemy)
    data_backend: str = "supabase"

    # Supabase
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None

    # Database
    database_url: str = "sqlite+aiosqlite:///./gulfjobs.db"

    # Relations
    jobs_table: str = "jobs_job"
    applications_table: str = "applications"

    # Listing / network
    page_size: int = 7
    request_timeout_seconds: float = 15.0

    # App settings
    environment: str = "development"
    log_level: str = "INFO"
    api_port: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
