"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "MoodReply"
    # Vite dev server of the desktop shell
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:5123"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    # Gemini API
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
    # Optional key registered in the credential store at startup
    GEMINI_API_KEY: Optional[str] = None
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
