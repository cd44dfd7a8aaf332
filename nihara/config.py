"""Configuration management for the application."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    cors_origins: list[str] = Field(
        default=["*"], description="Origins allowed to call the API"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level for the stdout sink")

    # Gemini Configuration
    gemini_api_key: str | None = Field(
        default=None, description="Gemini API key (GEMINI_API_KEY)"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
