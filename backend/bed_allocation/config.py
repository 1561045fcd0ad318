"""
Centralized application configuration.
All settings live in one place for easy maintenance.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Main system configuration."""
    
    # ============================================
    # APPLICATION
    # ============================================
    APP_TITLE: str = "Emergency Bed Allocation Service"
    APP_DESCRIPTION: str = "Nearest-hospital bed allocation for emergency requests"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    
    # ============================================
    # DATABASE
    # ============================================
    DATABASE_URL: str = "sqlite:///./bed_allocation.db"
    SEED_DATA_ON_STARTUP: bool = True
    
    # ============================================
    # CORS
    # ============================================
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]
    
    # ============================================
    # ALLOCATION
    # ============================================
    DEFAULT_SEARCH_LIMIT: int = 10
    AVERAGE_SPEED_KMH: float = 60.0  # effective ambulance speed
    STATUS_UPDATE_MAX_RETRIES: int = 3
    DEFAULT_PAGE_SIZE: int = 20
    
    # ============================================
    # LOGGING
    # ============================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
