from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_PORT = 8080


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY") or None
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.9"))
    top_p: float = float(os.getenv("MODEL_TOP_P", "0.95"))
    google_cloud_location: str = os.getenv("GOOGLE_CLOUD_LOCATION", "us-central1")
    # 200 keeps failures indistinguishable from successes at the HTTP level.
    error_status_code: int = int(os.getenv("ERROR_STATUS_CODE", "200"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class ServerConfig:
    """Where the HTTP listener binds. Loaded once at process start."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        raw = (env.get("PORT") or "").strip()
        if not raw:
            return cls()
        try:
            port = int(raw)
        except ValueError as exc:
            raise ValueError(f"PORT must be an integer, got {raw!r}") from exc
        return cls(port=port)
