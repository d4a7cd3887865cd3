import os
from pathlib import Path

# Basic settings helper to read environment configuration.

PACKAGE_DIR = Path(__file__).resolve().parent


def _as_int(val: str | None, default: int) -> int:
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _as_float(val: str | None, default: float | None = None) -> float | None:
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        return default


class Settings:
    def __init__(self) -> None:
        self.CATALOG_URL: str = os.getenv("BOOKSHELF_CATALOG_URL", "https://fakerapi.it/api/v1/books")
        # Unset means the transport default (no explicit timeout).
        self.FETCH_TIMEOUT: float | None = _as_float(os.getenv("BOOKSHELF_FETCH_TIMEOUT"))
        self.HOST: str = os.getenv("BOOKSHELF_HOST", "0.0.0.0")
        self.PORT: int = _as_int(os.getenv("BOOKSHELF_PORT"), 8080)
        self.TEMPLATES_DIR: str = os.getenv("BOOKSHELF_TEMPLATES_DIR", str(PACKAGE_DIR / "templates"))
        self.STATIC_DIR: str = os.getenv("BOOKSHELF_STATIC_DIR", str(PACKAGE_DIR / "static"))
        self.LOG_LEVEL: str = os.getenv("BOOKSHELF_LOG_LEVEL", "INFO").upper()


settings = Settings()
