import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: str | None, default: int) -> int:
    if val is None or val == "":
        return default
    return int(val)


class Settings:
    def __init__(self) -> None:
        # The "store" logical database holds the books collection.
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{BACKEND_ROOT / 'store.db'}")
        self.DB_ISOLATION_LEVEL: str | None = os.getenv("DB_ISOLATION_LEVEL") or None
        self.BOOKS_HOST: str = os.getenv("BOOKS_HOST", "0.0.0.0")
        self.BOOKS_PORT: int = _as_int(os.getenv("BOOKS_PORT"), 9099)
        self.PEOPLE_HOST: str = os.getenv("PEOPLE_HOST", "0.0.0.0")
        self.PEOPLE_PORT: int = _as_int(os.getenv("PEOPLE_PORT"), 1234)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.SEED_PEOPLE: bool = _as_bool(os.getenv("SEED_PEOPLE"), True)


settings = Settings()
