# paygate/config.py
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

DEFAULT_PORT = 8080


class Settings(BaseModel):
    stripe_secret_key: Optional[str] = None
    port: int = DEFAULT_PORT
    debug: bool = False
    cors_origins: List[str] = []


def _as_bool(raw: Optional[str], default: bool = False) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes")


def load_settings() -> Settings:
    """
    Reads the process environment (plus an optional .env file).
    Variables already set in the environment win over the .env file.
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)

    # "" is treated like an unset key
    secret_key = os.getenv("STRIPE_SECRET_KEY") or None

    raw_port = os.getenv("PORT", "").strip()
    port = int(raw_port) if raw_port else DEFAULT_PORT

    # CORS_ORIGINS is a comma-separated list (ex: "https://shop.example.com,http://localhost:3000")
    raw_origins = os.getenv("CORS_ORIGINS", "").strip()
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

    return Settings(
        stripe_secret_key=secret_key,
        port=port,
        debug=_as_bool(os.getenv("DEBUG")),
        cors_origins=origins,
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
