# Standard library imports
import os
from typing import Final, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "snapfind")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Vision API Configuration (OpenAI-compatible chat completions)
        self.openai_api_key: Final[str] = os.getenv("OPENAI_API_KEY", "")
        self.vision_model: Final[str] = os.getenv("VISION_MODEL", "gpt-4o")
        self.vision_api_url: Final[str] = os.getenv(
            "VISION_API_URL",
            "https://api.openai.com/v1/chat/completions"
        )
        self.vision_timeout_seconds: Final[float] = float(os.getenv("VISION_TIMEOUT_SECONDS", "30"))

        # Capture quota
        self.daily_picture_limit: Final[int] = int(os.getenv("DAILY_PICTURE_LIMIT", "10"))
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")

        # On-device cache (single JSON blob)
        self.local_cache_path: Final[str] = os.getenv("LOCAL_CACHE_PATH", "data/snapfind_cache.json")

        # Object storage (S3-compatible)
        self.storage_bucket: Final[str] = os.getenv("STORAGE_BUCKET", "images")
        self.storage_region: Final[str] = os.getenv("STORAGE_REGION", "us-east-1")
        self.storage_endpoint_url: Final[Optional[str]] = os.getenv("STORAGE_ENDPOINT_URL") or None
        self.storage_access_key: Final[Optional[str]] = os.getenv("STORAGE_ACCESS_KEY") or None
        self.storage_secret_key: Final[Optional[str]] = os.getenv("STORAGE_SECRET_KEY") or None
        self.display_url_ttl_seconds: Final[int] = int(os.getenv("DISPLAY_URL_TTL_SECONDS", "86400"))
        self.analysis_url_ttl_seconds: Final[int] = int(os.getenv("ANALYSIS_URL_TTL_SECONDS", "3600"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
