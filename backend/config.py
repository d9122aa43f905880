"""Centralized configuration — all env vars in one place."""

import os

DEFAULT_PORT = 3000
DEFAULT_SOURCE_URL = "https://jsonplaceholder.typicode.com/photos"
DEFAULT_REFRESH_INTERVAL_SECONDS = 60.0


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Server
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = _int_env("PORT", DEFAULT_PORT)
        self.home_route_enabled: bool = os.getenv("HOME_ROUTE_ENABLED", "true").lower() not in (
            "0",
            "false",
            "no",
            "off",
        )

        # Upstream photo source
        self.source_url: str = os.getenv("SOURCE_URL", DEFAULT_SOURCE_URL)
        self.refresh_interval_seconds: float = _float_env(
            "REFRESH_INTERVAL_SECONDS", DEFAULT_REFRESH_INTERVAL_SECONDS
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of env vars that are set but could not be parsed."""
        invalid = []
        if os.getenv("PORT") and not _parses(os.getenv("PORT"), int):
            invalid.append("PORT")
        interval = os.getenv("REFRESH_INTERVAL_SECONDS")
        if interval and (not _parses(interval, float) or float(interval) <= 0):
            invalid.append("REFRESH_INTERVAL_SECONDS")
        return invalid


def _parses(value: str, cast) -> bool:
    try:
        cast(value)
    except ValueError:
        return False
    return True


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value and _parses(value, int):
        return int(value)
    return default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value and _parses(value, float) and float(value) > 0:
        return float(value)
    return default


settings = Settings()
