# Standard library imports
import logging
import os
from typing import Final, List, Optional

from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Application metadata
        self.app_name: Final[str] = os.getenv("APP_NAME", "Hospital Management API")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        
        # Timezone Configuration
        # Weekday and clock time of a requested appointment are read in this timezone
        # (e.g., "UTC", "America/Sao_Paulo", "Europe/Lisbon")
        self.clinic_timezone: Final[str] = os.getenv("CLINIC_TIMEZONE", "UTC")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # CORS Configuration
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        
        # Appointment Configuration
        self.default_appointment_status: Final[str] = os.getenv(
            "DEFAULT_APPOINTMENT_STATUS",
            "scheduled"
        )
    
    @property
    def log_level_value(self) -> int:
        """Numeric logging level (falls back to INFO for unknown names)."""
        return getattr(logging, self.log_level, logging.INFO)


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
