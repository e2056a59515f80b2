"""
backend/app/config.py - environment settings
───────────────────────────────────
Values come from a .env file or the process environment.
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # ─────────────────────────────────────
    # App
    # ─────────────────────────────────────
    APP_NAME: str = "Indowarehub Sales API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ─────────────────────────────────────
    # Server
    # ─────────────────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # ─────────────────────────────────────
    # CORS
    # ─────────────────────────────────────
    # comma separated origins (e.g. "http://localhost:8501,https://sales.example.com")
    CORS_ORIGINS: str = "http://localhost:8501"
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: str = "GET,POST,PUT,DELETE,OPTIONS"
    CORS_ALLOW_HEADERS: str = "*"

    # ─────────────────────────────────────
    # Export
    # ─────────────────────────────────────
    # utf-8-sig so Excel opens "m³" / "≤" headers correctly
    EXPORT_ENCODING: str = "utf-8-sig"

    @property
    def cors_origins_list(self) -> List[str]:
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def cors_methods_list(self) -> List[str]:
        if self.CORS_ALLOW_METHODS == "*":
            return ["*"]
        return [method.strip() for method in self.CORS_ALLOW_METHODS.split(",")]

    @property
    def cors_headers_list(self) -> List[str]:
        if self.CORS_ALLOW_HEADERS == "*":
            return ["*"]
        return [header.strip() for header in self.CORS_ALLOW_HEADERS.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
