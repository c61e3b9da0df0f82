"""Runtime configuration read from the environment and ``.env``."""

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    jwt_secret: Optional[str]
    cors_origins: List[str]
    token_ttl_seconds: int
    log_level: str


def get_settings() -> Settings:
    """Build settings from the current environment.

    Values are read on every call so that changes to the environment (for
    example a freshly edited ``.env`` picked up on reload) take effect.
    """
    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "4000")),
        jwt_secret=os.getenv("JWT_SECRET") or None,
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        token_ttl_seconds=int(os.getenv("TOKEN_TTL_SECONDS", "3600")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
