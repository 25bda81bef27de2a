"""
Configuration settings for the booking webhook backend
"""
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'  # Ignore extra fields in .env
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=3000, description="API port")
    api_reload: bool = Field(default=False, description="Enable auto-reload for development")
    base_url_path: str = Field(default="", description="Path prefix for every route, e.g. /bookings-app")

    # CORS Settings
    allowed_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated origins into a list"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def route_prefix(self) -> str:
        """Base URL path with a leading slash and no trailing slash"""
        prefix = self.base_url_path.strip().strip("/")
        return f"/{prefix}" if prefix else ""

    # Rate Limiting (webhook receivers)
    rate_limit_enabled: bool = Field(default=True, description="Enable rate limiting on webhook receivers")
    rate_limit_per_minute: int = Field(default=120, description="Webhook calls allowed per minute per IP")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Development
    debug: bool = Field(default=False, description="Debug mode")

    # Listings
    default_page_size: int = Field(default=12, description="Bookings per page when no limit is given")

    # Storage
    bookings_data_dir: Path = Field(
        default=PROJECT_ROOT / "booking_data",
        description="Directory holding one JSON file per booking (Zapier webhook)"
    )
    bookings_logs_dir: Path = Field(
        default=PROJECT_ROOT / "booking_logs",
        description="Directory holding raw Bokun webhook payloads"
    )
    public_dir: Path = Field(
        default=PROJECT_ROOT / "public",
        description="Static frontend served under the base URL path when present"
    )


# Create singleton instance
settings = Settings()
