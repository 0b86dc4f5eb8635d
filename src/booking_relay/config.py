"""
Configuration for the booking relay.

One settings layer shared by the HTTP server and the Lambda handlers,
loaded from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_FROM_EMAIL = 'Car Rental <onboarding@resend.dev>'
DEFAULT_TO_EMAIL = 'oneeb593@gmail.com'


class Settings(BaseSettings):
    """Relay settings loaded from environment variables."""

    # Resend
    RESEND_API_KEY: str | None = None
    RESEND_BASE_URL: str = 'https://api.resend.com'
    HTTP_TIMEOUT_SECONDS: int = Field(default=10, ge=1, le=60)

    # Addresses
    FROM_EMAIL: str = DEFAULT_FROM_EMAIL
    TO_EMAIL: str = DEFAULT_TO_EMAIL

    # Deployment
    ENVIRONMENT: str = 'production'
    LOG_LEVEL: str = 'INFO'
    LOG_JSON: bool = False

    # Server
    HOST: str = '0.0.0.0'
    PORT: int = 3001

    @property
    def email_configured(self) -> bool:
        """True when a non-blank provider credential is present."""
        return bool(self.RESEND_API_KEY and self.RESEND_API_KEY.strip())

    @property
    def is_development(self) -> bool:
        """Raw provider error text is only echoed to callers in development."""
        return self.ENVIRONMENT.strip().lower() == 'development'


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
