from typing import Annotated, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

DEFAULT_ADMIN_PASSCODE = "secret123"


class Settings(BaseSettings):
    """Application settings."""

    # Basic settings
    PROJECT_NAME: str = "Slot Booking API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Security
    ADMIN_PASSCODE: str = DEFAULT_ADMIN_PASSCODE

    # CORS
    ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    # Scheduling
    HOLIDAY_COUNTRY: Optional[str] = None  # e.g. "US"; unset keeps weekdays open

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = {"env_file": ".env", "case_sensitive": True}

    @property
    def uses_default_passcode(self) -> bool:
        return self.ADMIN_PASSCODE == DEFAULT_ADMIN_PASSCODE


# Global settings instance
settings = Settings()
