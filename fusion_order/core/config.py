"""Application configuration"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# HS256 needs at least 256 bits of key material
MIN_SECRET_KEY_BYTES = 32


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "FusionOrder"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Order form management backend"

    # Security
    SECRET_KEY: str = Field(...)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=24 * 60)
    ALGORITHM: str = "HS256"

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./fusion_order.db")
    AUTO_CREATE_TABLES: bool = Field(default=False)  # Alembic owns the schema otherwise

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["http://localhost:3000", "http://localhost:5173"])

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Development
    DEBUG: bool = Field(default=False)
    TESTING: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("SECRET_KEY")
    @classmethod
    def secret_key_long_enough(cls, value: str) -> str:
        if len(value.encode("utf-8")) < MIN_SECRET_KEY_BYTES:
            raise ValueError(f"SECRET_KEY must be at least {MIN_SECRET_KEY_BYTES} bytes long")
        return value


settings = Settings()
