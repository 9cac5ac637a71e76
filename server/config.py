# server/config.py

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str) -> Optional[int]:
    raw = (os.getenv(name) or "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings, read from the environment (or a local .env file)
    each time an instance is built.
    """

    DATABASE_URL: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./data/app.db"))

    HOST: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    CORS_ALLOW_ORIGINS: str = field(default_factory=lambda: os.getenv("CORS_ALLOW_ORIGINS", "*"))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # POST /thoughts has always been open; flip this to require a token.
    REQUIRE_AUTH_TO_POST: bool = field(default_factory=lambda: _env_bool("REQUIRE_AUTH_TO_POST", False))

    # Unset means tokens never expire.
    ACCESS_TOKEN_TTL_MINUTES: Optional[int] = field(default_factory=lambda: _env_int("ACCESS_TOKEN_TTL_MINUTES"))

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


def load_settings() -> Settings:
    return Settings()
