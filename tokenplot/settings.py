from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Server settings loaded from environment variables (or a .env file).

    Attributes are read at construction time so tests can patch the
    environment and build a fresh instance.
    """

    def __init__(self) -> None:
        self.host: str = os.getenv("HOST", "127.0.0.1")
        self.port: int = int(os.getenv("PORT", "3001"))
        self.history_size: int = int(os.getenv("HISTORY_SIZE", "5"))
        self.debug: bool = _env_flag("FLASK_DEBUG")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
