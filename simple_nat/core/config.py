"""
Application configuration settings.

Central configuration module using Pydantic BaseSettings with environment variable support.
Loads from .env file and environment variables.
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import List, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists (python-dotenv)
env_path = Path(".env")
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # App settings
    APP_NAME: str = "Simple NAT"
    APP_ENV: str = Field(default="local")
    DEBUG: bool = Field(default=False)

    # Translation table input/output files (names match the classic NAT/FLOW/OUTPUT layout)
    RULES_FILE: str = Field(
        default="NAT",
        description="Rule file loaded into the translation table (one '<src>,<dst>' per line)",
    )
    FLOWS_FILE: str = Field(
        default="FLOW",
        description="Query file processed by the batch driver (one '<ip>:<port>' per line)",
    )
    OUTPUT_FILE: str = Field(
        default="OUTPUT",
        description="File the batch driver writes translation results to",
    )

    # CORS settings
    CORS_ORIGINS: Union[str, List[str]] = Field(
        default='["http://localhost:3000", "http://localhost:8000"]',
    )

    @field_validator("CORS_ORIGINS")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from string or list."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not JSON, treat as comma-separated
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Request limits
    MAX_UPLOAD_SIZE: int = Field(
        default=1024 * 1024, description="Max flow file upload size in bytes (1MB default)"
    )
    MAX_BATCH_SIZE: int = Field(
        default=1000, description="Max number of queries accepted by the batch translate endpoint"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    LOG_DIR: str = Field(default="logs", description="Directory for the rotating log file")
    LOG_TO_FILE: bool = Field(default=True, description="Also write logs to LOG_DIR/simple_nat.log")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

# Global settings instance
settings = get_settings()
