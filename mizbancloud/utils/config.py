"""
Configuration management using Pydantic Settings
Loads and validates MIZBANCLOUD_* environment variables (optionally from .env)
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mizbancloud.models.common import ClientConfig


class Settings(BaseSettings):
    """
    SDK settings loaded from environment variables.
    Every field has a default, so an empty environment yields a local setup.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="MIZBANCLOUD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Service endpoints
    auth_base_url: str = Field(
        default="http://localhost:8003",
        description="Base URL for the Auth/Main API"
    )
    cdn_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL for the CDN API"
    )
    cloud_base_url: str = Field(
        default="http://localhost:8001",
        description="Base URL for the Cloud API"
    )
    
    # Request behaviour
    timeout: int = Field(
        default=30000,
        gt=0,
        description="Request timeout in milliseconds"
    )
    language: Literal["en", "fa"] = Field(
        default="en",
        description="Response language: en or fa"
    )
    
    # Credentials
    api_token: Optional[str] = Field(
        default=None,
        description="API token sent as a Bearer credential"
    )
    
    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file name (written under logs/)"
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper
    
    @field_validator("api_token")
    @classmethod
    def blank_token_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty MIZBANCLOUD_API_TOKEN as unset"""
        if v is not None and not v.strip():
            return None
        return v
    
    def client_config(self) -> ClientConfig:
        """
        Build the HTTP client options from these settings.
        
        Returns:
            ClientConfig for HttpClient / MizbanCloud
        """
        return ClientConfig(
            auth_base_url=self.auth_base_url,
            cdn_base_url=self.cdn_base_url,
            cloud_base_url=self.cloud_base_url,
            timeout=self.timeout,
            language=self.language,
        )
    
    def has_token(self) -> bool:
        """Check if an API token is configured"""
        return bool(self.api_token)


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.
    Loads configuration from the environment (and .env, if present) on first call.
    
    Returns:
        Settings instance
        
    Raises:
        ValidationError: If environment variables are invalid
    """
    global _settings
    
    if _settings is None:
        _settings = Settings()
    
    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None
