"""Environment-driven service configuration.

Values come from environment variables or a local `.env` file.
"""

from functools import lru_cache
from pathlib import Path
from urllib.parse import unquote, urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

POSTGRES_SCHEMES = {"postgres", "postgresql"}
SQLITE_BUSY_TIMEOUT_SECONDS = 20


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    secret_key: str = Field(default="django-insecure-local-development-key")
    debug: bool = False
    allowed_hosts: str = Field(default="*", description="Comma-separated host names")
    database_url: str = Field(default="sqlite:///db.sqlite3")
    port: int = 10000
    signup_rate: str = Field(default="3/15m", description="Signup attempts per client address")
    events_cache_timeout: int = Field(default=60, ge=0)
    log_level: str = "INFO"

    @property
    def allowed_host_list(self) -> list[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]


def database_config(url: str, base_dir: Path) -> dict:
    """Translate a DATABASE_URL into a Django DATABASES entry."""
    parsed = urlparse(url)
    if parsed.scheme == "sqlite":
        name = parsed.path[1:] or ":memory:"
        if name != ":memory:" and not Path(name).is_absolute():
            name = str(base_dir / name)
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": name,
            # Writers take the lock at BEGIN and queue on the busy timeout.
            "OPTIONS": {
                "transaction_mode": "IMMEDIATE",
                "timeout": SQLITE_BUSY_TIMEOUT_SECONDS,
            },
        }
    if parsed.scheme in POSTGRES_SCHEMES:
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": parsed.path.lstrip("/"),
            "USER": unquote(parsed.username or ""),
            "PASSWORD": unquote(parsed.password or ""),
            "HOST": parsed.hostname or "",
            "PORT": str(parsed.port or ""),
        }
    raise ValueError(f"Unsupported DATABASE_URL scheme: {parsed.scheme!r}")


@lru_cache
def get_settings() -> ServiceSettings:
    return ServiceSettings()
