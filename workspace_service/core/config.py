# File: /workspace_service/core/config.py | Version: 1.4 | Title: Central Service Settings (Pydantic v2)
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Database ---
    DATABASE_URL: str = "sqlite:///./workspace.db"
    DB_ECHO: bool = False

    # --- Connection pool (ignored for SQLite) ---
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: float = 30.0  # seconds a caller blocks waiting for a connection

    # --- Server (used by the `workspace-view-service` launcher) ---
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # --- API behavior toggles ---
    ENABLE_STD_ERRORS: bool = (
        False  # set True in .env to also standardize HTTP/validation/unhandled errors
    )

    # v2-style config
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
