import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Cache
    cache_capacity: int = int(os.getenv("LRU_CACHE_SIZE", "1000"))

    # Upstream
    upstream_base_url: str = os.getenv("UPSTREAM_BASE_URL", "https://api.github.com/users/")
    upstream_token: str = os.getenv("API_ACCESS_TOKEN", "")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "console")  # or "json"

    @property
    def has_token(self) -> bool:
        """Check if an upstream access token is configured.

        Returns:
            True if a non-empty token is set, False otherwise
        """
        return bool(self.upstream_token)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_capacity < 1:
            raise ValueError(f"LRU_CACHE_SIZE must be at least 1, got {self.cache_capacity}")

        if self.upstream_timeout <= 0:
            raise ValueError(f"UPSTREAM_TIMEOUT must be positive, got {self.upstream_timeout}")

        if self.log_format not in ["console", "json"]:
            raise ValueError(f"LOG_FORMAT must be one of ['console', 'json'], got {self.log_format}")

        if self.log_level.upper() not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(
                f"LOG_LEVEL must be one of ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], got {self.log_level}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
