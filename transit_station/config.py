import logging
import sys

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Public Transportation Station Management System"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(message)s"

    # Stations
    MAX_SCHEDULES_PER_STATION: int = 10
    CLEAR_ASSIGNMENT_ON_REMOVAL: bool = False

    # Demo
    DEMO_DISTANCE_KM: float = 120.0

    class Config:
        env_file = ".env"
        env_prefix = "TRANSIT_"
        case_sensitive = True

settings = Settings()


def setup_logging(level: str = None, fmt: str = None) -> None:
    """Send event notices to stdout as plain console lines"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=fmt or settings.LOG_FORMAT,
        stream=sys.stdout,
        force=True
    )
