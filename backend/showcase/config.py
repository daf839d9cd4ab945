"""Application configuration via pydantic-settings."""

import os
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/showcase/config.py -> repository root
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ROOT_DIR = _BACKEND_DIR.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Static client assets (index.html, admin.html, styles, scripts)
    CLIENT_DIR: str = str(_ROOT_DIR / "client")

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS – middleware is only installed when at least one origin is listed
    BACKEND_CORS_ORIGINS: List[str] = []

    @property
    def client_path(self) -> Path:
        return Path(self.CLIENT_DIR)


def _build_settings() -> Settings:
    """Build settings, fixing a relative client directory to be absolute."""
    s = Settings(
        _env_file=str(_ROOT_DIR / ".env"),
        _env_file_encoding="utf-8",
    )
    if not os.path.isabs(s.CLIENT_DIR):
        s.CLIENT_DIR = str(_ROOT_DIR / s.CLIENT_DIR)
    return s


settings = _build_settings()
