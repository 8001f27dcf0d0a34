"""
Centralized configuration for the BugStore domain layer
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, read from the environment and .env"""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Paging
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
