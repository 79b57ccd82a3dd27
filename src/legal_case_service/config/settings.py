"""Service configuration settings."""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service configuration
    service_name: str = "legal-case-service"
    environment: str = "development"
    port: int = 4000

    # Database configuration
    database_url: str = "sqlite+aiosqlite:///./legal_cases.db"

    # Repository backend: "sql" or "inmemory"
    storage_type: str = "sql"

    # CORS configuration
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    # Token signing
    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Password hashing (any passlib scheme name)
    password_scheme: str = "pbkdf2_sha256"

    # Optional ADMIN account seeded at startup
    bootstrap_admin_username: Optional[str] = None
    bootstrap_admin_password: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def uses_sql_storage(self) -> bool:
        return self.storage_type.lower() != "inmemory"
