# timegap/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "127.0.0.1"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Upload ────────────────────────────────────────────────────────────
    MAX_UPLOAD_MB: int = 20

    # ── Summaries ─────────────────────────────────────────────────────────
    SORT_SUMMARIES: bool = False    # Sort by name/code/day instead of first-seen order

    # ── Export ────────────────────────────────────────────────────────────
    EXPORT_SHEET_NAME: str = "Time Gap Summary"
    EXPORT_FILE_NAME: str = "time_gap_summary.xlsx"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None   # Defaults to <repo>/logs
    LOG_FILE: str = "pipeline.log"
    LOG_MAX_MB: int = 5
    LOG_BACKUP_COUNT: int = 10

    @property
    def MAX_UPLOAD_BYTES(self) -> int:
        return self.MAX_UPLOAD_MB * 1024 * 1024

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
