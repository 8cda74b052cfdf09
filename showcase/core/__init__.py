"""
Showcase Core
=============

Core utilities and shared functionality for Showcase modules.
"""

from .config import Config, get_setting
from .database import Database
from .errors import (
    ShowcaseError, ValidationError, InvalidArgument, InvalidCredentials,
    Unauthenticated, NotFound, StoreError, ConfigurationError,
    register_error_handlers,
)
from .logging_service import LoggingService

__all__ = [
    'Config', 'get_setting', 'Database', 'LoggingService',
    'ShowcaseError', 'ValidationError', 'InvalidArgument', 'InvalidCredentials',
    'Unauthenticated', 'NotFound', 'StoreError', 'ConfigurationError',
    'register_error_handlers',
]
