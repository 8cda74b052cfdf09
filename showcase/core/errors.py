"""
Showcase Errors
===============

Every error a handler can surface to a client derives from ShowcaseError
and carries the HTTP status it maps to. register_error_handlers() turns
them into JSON responses of the form {"error": message}.
"""

import logging

from flask import jsonify

logger = logging.getLogger(__name__)


class ShowcaseError(Exception):
    """Base class for errors returned to API clients"""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ShowcaseError):
    """Missing or malformed input"""
    status_code = 400
    message = 'Missing required fields'


class InvalidArgument(ShowcaseError):
    """Malformed identifier in the URL"""
    status_code = 400
    message = 'Invalid project ID'


class InvalidCredentials(ShowcaseError):
    """Unknown username or wrong password - deliberately indistinguishable"""
    status_code = 401
    message = 'Invalid credentials'


class Unauthenticated(ShowcaseError):
    """Missing, malformed or expired session token"""
    status_code = 401
    message = 'Unauthorized'


class NotFound(ShowcaseError):
    status_code = 404
    message = 'Project not found'


class StoreError(ShowcaseError):
    """Backing store failure. The original exception stays server-side."""
    status_code = 500
    message = 'Internal server error'


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing"""


def register_error_handlers(app):
    """Map ShowcaseError subclasses to JSON error responses"""

    @app.errorhandler(ShowcaseError)
    def handle_showcase_error(error):
        if isinstance(error, StoreError):
            from .logging_service import LoggingService
            LoggingService.log_error_with_traceback('store', error.__cause__ or error)
            # Never leak the driver message to the client
            return jsonify({'error': StoreError.message}), error.status_code
        return jsonify({'error': error.message}), error.status_code
