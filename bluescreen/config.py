"""
Application configuration management.
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Blue Screen of App"
    app_url: str = "http://localhost:3000"
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Features
    enable_analytics: bool = False
    enable_qr_codes: bool = True
    default_qr_url: str = "https://github.com"

    # Security
    cors_origin: str = "*"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origins(self) -> List[str]:
        """CORS origins parsed from the comma-separated ``cors_origin`` value."""
        origins = [origin.strip() for origin in self.cors_origin.split(",")]
        return [origin for origin in origins if origin] or ["*"]


# Global settings instance
settings = Settings()
