"""Catalog content API backend."""

from .config import APIConfig, load_config
from .main import app, create_app
from .routes import get_api_config, get_content_repository, router
from .schemas import HealthResponse, HoursErrorResponse

__all__ = [
    # Configuration
    "APIConfig",
    "load_config",
    # Application
    "app",
    "create_app",
    "router",
    # Dependencies
    "get_content_repository",
    "get_api_config",
    # Schemas
    "HealthResponse",
    "HoursErrorResponse",
]
