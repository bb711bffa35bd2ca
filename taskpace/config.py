"""
TASKPACE API - Configuration Module

This module handles application configuration via environment variables.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "TASKPACE API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # MongoDB
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://mongodb:27017")
    MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "taskpace")

    # CORS - Allowed origins for client requests, comma-separated
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
        if origin.strip()
    ]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Wall-clock zone for deadlines without an offset and for calendar cells
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

    # Overdue notification scanner
    OVERDUE_SCAN_ENABLED: bool = os.getenv("OVERDUE_SCAN_ENABLED", "true").lower() == "true"
    OVERDUE_SCAN_INTERVAL_SECONDS: int = int(os.getenv("OVERDUE_SCAN_INTERVAL_SECONDS", "300"))

    # Tasks
    COMPLETED_TASK_RETENTION_DAYS: int = int(os.getenv("COMPLETED_TASK_RETENTION_DAYS", "30"))
    DEADLINE_WARNING_HOURS: int = int(os.getenv("DEADLINE_WARNING_HOURS", "6"))


settings = Settings()
