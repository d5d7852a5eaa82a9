"""
Employee Service: Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before app starts.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development against a
    MongoDB instance on the loopback interface.
    """

    # ── MongoDB ───────────────────────────────────────────────────────────
    # Format: mongodb://host:port/ or mongodb+srv://cluster/
    mongo_url: str = Field(
        default="mongodb://127.0.0.1:27017/",
        description="MongoDB connection URI",
    )
    mongo_database: str = Field(default="fiber", min_length=1)
    employees_collection: str = Field(default="employees", min_length=1)

    # What: How long startup waits for a reachable server before giving up
    # Passed to the driver as serverSelectionTimeoutMS and connectTimeoutMS
    mongo_connect_timeout: int = Field(default=30, ge=1, le=300)

    @field_validator("mongo_url")
    @classmethod
    def validate_mongo_url(cls, v: str) -> str:
        """Rejects URIs the driver would refuse later with a less obvious error."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(
                f"Invalid mongo_url '{v}'. Must start with mongodb:// or mongodb+srv://"
            )
        return v

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)
    greeting: str = Field(default="employee service")

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGO_URL and mongo_url both work
    }

    @property
    def mongo_timeout_ms(self) -> int:
        return self.mongo_connect_timeout * 1000


# Singleton instance, imported throughout the application
settings = Settings()
