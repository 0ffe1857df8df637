
# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "social_posts")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Password hashing work factor (public, fixed per deployment)
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Headless render service Configuration
        self.render_service_url: Final[str] = os.getenv(
            "RENDER_SERVICE_URL",
            "http://localhost:3001"
        )
        self.render_service_token: Final[str] = os.getenv("RENDER_SERVICE_TOKEN", "")

        # Email Configuration (SMTP relay; the provider API key is the SMTP password)
        self.smtp_host: Final[str] = os.getenv("SMTP_HOST", "smtp.sendgrid.net")
        self.smtp_port: Final[int] = int(os.getenv("SMTP_PORT", "465"))
        self.smtp_user: Final[str] = os.getenv("SMTP_USER", "apikey")
        self.smtp_use_tls: Final[bool] = _env_bool("SMTP_USE_TLS", "true")
        self.email_provider_api_key: Final[str] = os.getenv("EMAIL_PROVIDER_API_KEY", "")
        self.contact_recipient: Final[str] = os.getenv("CONTACT_RECIPIENT", "")
        self.email_from: Final[str] = os.getenv("EMAIL_FROM", "")
        self.email_from_name: Final[str] = os.getenv("EMAIL_FROM_NAME", "Social Posts")


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
