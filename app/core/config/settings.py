from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Storage settings
    STORAGE_BACKEND: str = "memory"  # "memory" or "sql"
    DATABASE_URL: str = "sqlite:///./feedback_forms.db"

    # API settings
    API_V1_PREFIX: str = "/api"
    PROJECT_NAME: str = "Feedback Forms API"
    CORS_ORIGINS: list = ["*"]

    # Public link used when sharing a form with respondents
    PUBLIC_BASE_URL: str = "http://localhost:3000"

    # Rate limiting
    REDIS_URL: Optional[str] = None
    RATE_LIMIT_PER_MINUTE: int = 100

    # Logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

@lru_cache()
def get_settings() -> Settings:
    """
    Get settings instance with caching
    Returns:
        Settings instance
    """
    return Settings()
