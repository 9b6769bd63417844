"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Centralised settings: no hardcoded values anywhere else."""

    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./marketplace.db", env="DATABASE_URL"
    )

    # Sessions
    session_cookie_name: str = Field("sid", env="SESSION_COOKIE_NAME")
    session_ttl_seconds: int = Field(86_400, env="SESSION_TTL_SECONDS")
    session_max_entries: int = Field(10_000, env="SESSION_MAX_ENTRIES")

    # Security
    bcrypt_rounds: int = Field(10, env="BCRYPT_ROUNDS")
    allowed_origins: str = Field(
        "http://localhost:3000,http://localhost:3001",
        env="ALLOWED_ORIGINS",
    )

    # Orders
    # Off by default: restaurants may overwrite any status with any other.
    enforce_status_transitions: bool = Field(
        False, env="ENFORCE_STATUS_TRANSITIONS"
    )

    # App
    app_env: str = Field("development", env="APP_ENV")
    log_level: str = Field("INFO", env="LOG_LEVEL")
    seed_demo_data: bool = Field(True, env="SEED_DEMO_DATA")

    # Derived
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def cookie_secure(self) -> bool:
        return self.is_production

    @property
    def cookie_samesite(self) -> str:
        """Cross-site cookies in production need SameSite=None (and Secure)."""
        return "none" if self.is_production else "lax"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()


settings = get_settings()
