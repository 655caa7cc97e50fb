"""
Centralised settings loader.

Values come from the process environment or a local `.env` file.
Components never read `settings` lazily: `main.py` hands the values to
the Gemini client and the Sheets sink once, at startup.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = "local"
    log_level: str = "INFO"

    # ─── Gemini ─────────────────────────────────────────────────────
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    gemini_temperature: float = Field(0.2, ge=0.0, le=2.0)

    # ─── Google Sheets (service account) ────────────────────────────
    google_service_account_email: str | None = None
    google_private_key: str | None = None
    google_spreadsheet_id: str | None = None
    sheet_range: str = "Log!A:L"

    # allow other env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
