"""
Core module - Error handling and logging setup.
"""
from app.core.errors import (
    ApiError,
    ConfigurationError,
    register_exception_handlers,
)
from app.core.logging_config import configure_logging

__all__ = [
    "ApiError",
    "ConfigurationError",
    "register_exception_handlers",
    "configure_logging",
]
