"""
Amount Words Middleware Package
Request-level error handling.
"""

from amount_words.middleware.error_handler import (
    error_response,
    register_error_handlers,
    safe_handler,
    ERROR_CODES,
)

__all__ = [
    # Error handling
    'error_response',
    'register_error_handlers',
    'safe_handler',
    'ERROR_CODES',
]
