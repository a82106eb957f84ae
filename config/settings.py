from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Storage
    data_directory: str = "storage/data"

    # Server Configuration
    port: int = 8000
    debug: bool = False
    cors_origins: List[str] = ["*"]

    # Pagination for grocery list listings
    default_page_size: int = 10
    max_page_size: int = 100

    # Logging
    service_name: str = "grocery-list-api"
    logfire_token: Optional[str] = None
    logfire_console: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False  # Allow DATA_DIRECTORY or data_directory


# Create singleton instance
settings = Settings()
