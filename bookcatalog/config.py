import os

# Basic settings helper to read environment configuration.


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self) -> None:
        self.TITLE: str = os.getenv("CATALOG_TITLE", "Book Catalog API")
        self.LOG_LEVEL: str = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()
        self.CACHE_ENABLED: bool = _as_bool(os.getenv("CATALOG_CACHE_ENABLED"), True)


settings = Settings()
