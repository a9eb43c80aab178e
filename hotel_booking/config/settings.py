"""
Environment configuration for the hotel booking service.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Application configuration
    APP_NAME: str = Field(default="Hotel Booking Service", alias="PROJECT_NAME")
    API_VERSION: str = Field(default="1.0.0", alias="PROJECT_VERSION")
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(default=["*"], alias="BACKEND_CORS_ORIGINS")

    # Database configuration
    DATABASE_URL: str = "sqlite:///./hotel_booking.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10
    DB_SQLITE_BUSY_TIMEOUT: float = 30.0

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "colored"
    LOG_FILE: Optional[str] = None

    # Business logic
    CURRENCY: str = "PGK"
    TAX_RATE: Decimal = Decimal("0.12")
    DEPOSIT_PERCENTAGE: Decimal = Decimal("0.50")
    BOOKING_REFERENCE_PREFIX: str = "BK"
    BOOKING_EMAIL_LOOKUP_LIMIT: int = 10

    # Simulated payment gateway
    PAYMENT_DECLINE_RATE: float = 0.1

    # Demo data
    SEED_DEMO_DATA: bool = True

    # Validators
    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS_ORIGINS from string to list"""
        if isinstance(v, str):
            # Handle JSON string format from .env
            if v.startswith('[') and v.endswith(']'):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator('TAX_RATE', 'DEPOSIT_PERCENTAGE')
    @classmethod
    def validate_fraction(cls, v: Decimal) -> Decimal:
        """Rates are fractions, e.g. 0.12 for 12%"""
        if v < 0 or v > 1:
            raise ValueError("Rate must be a fraction between 0 and 1")
        return v

    @field_validator('PAYMENT_DECLINE_RATE')
    @classmethod
    def validate_decline_rate(cls, v: float) -> float:
        if v < 0 or v > 1:
            raise ValueError("PAYMENT_DECLINE_RATE must be between 0 and 1")
        return v

    @field_validator('LOG_FORMAT')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in {"json", "colored", "standard"}:
            raise ValueError("LOG_FORMAT must be one of: json, colored, standard")
        return v

    def get_database_url(self) -> str:
        """Get the SQLAlchemy database URL"""
        return self.DATABASE_URL

    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
