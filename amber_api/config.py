"""
Client configuration management using Pydantic Settings.
Handles environment variables and default values for the Amber API client.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables prefixed with ``AMBER_``.
    """
    
    # Amber API Configuration
    base_url: str = Field(
        default="https://api.amber.com.au/v1",
        description="Base URL for the Amber Electric v1 API"
    )
    api_key: Optional[str] = Field(
        default=None,
        description="API key used by the development scripts"
    )
    request_timeout: float = Field(default=60.0, description="Per-request timeout in seconds")
    
    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json/text)")
    
    class Config:
        env_prefix = "AMBER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
