"""
Configuration helpers for the Barkeep backend.

Settings are read from environment variables once and cached, so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    session_secret_key: str
    session_cookie_name: str
    demo_session_max_age_days: int
    repos_root: str
    demo_email: str
    gravatar_base_url: str
    log_level: str

    @property
    def session_max_age_seconds(self) -> int:
        return self.demo_session_max_age_days * 24 * 60 * 60


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        session_secret_key=os.getenv("SESSION_SECRET_KEY", "dev-key-change-in-production"),
        session_cookie_name=os.getenv("SESSION_COOKIE_NAME", "barkeep_session"),
        demo_session_max_age_days=_int(os.getenv("DEMO_SESSION_MAX_AGE_DAYS", "365"), 365),
        repos_root=os.getenv("REPOS_ROOT", "repos"),
        demo_email=os.getenv("DEMO_EMAIL", "demo@barkeep.local").strip().lower(),
        gravatar_base_url=os.getenv("GRAVATAR_BASE_URL", "http://www.gravatar.com/avatar").rstrip("/"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
