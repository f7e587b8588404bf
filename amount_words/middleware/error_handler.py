"""
Amount Words Error Handler Middleware
Generic error responses without information disclosure.

Errors never leak stack traces or internal exception text to clients.
"""

from functools import wraps
from typing import Callable, Optional
from flask import jsonify, g, Flask
from werkzeug.exceptions import HTTPException
import traceback
import structlog

logger = structlog.get_logger(__name__)


# Standard error codes
ERROR_CODES = {
    'VALIDATION_ERROR': 'Invalid request data',
    'UNSUPPORTED_RANGE': 'Amount is outside the supported range',
    'NOT_FOUND': 'Resource not found',
    'METHOD_NOT_ALLOWED': 'Method not allowed for this resource',
    'UNSUPPORTED_MEDIA_TYPE': 'Request body must be JSON',
    'INTERNAL_ERROR': 'An unexpected error occurred',
}


def error_response(
    code: str,
    message: Optional[str] = None,
    status: int = 400,
    details: Optional[dict] = None
):
    """
    Create standardized error response.

    Only whitelisted detail keys are passed through.
    """
    response_body = {
        'error': message or ERROR_CODES.get(code, 'An error occurred'),
        'code': code,
        'request_id': g.get('request_id')
    }

    if details and isinstance(details, dict):
        safe_details = {
            k: v for k, v in details.items()
            if k in ('field', 'max_value', 'min_value', 'max_decimal_places')
        }
        if safe_details:
            response_body['details'] = safe_details

    return jsonify(response_body), status


def register_error_handlers(app: Flask) -> None:
    """Register global error handlers on Flask app."""

    @app.errorhandler(400)
    def bad_request(error):
        return error_response('VALIDATION_ERROR', status=400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response('NOT_FOUND', status=404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return error_response('METHOD_NOT_ALLOWED', status=405)

    @app.errorhandler(415)
    def unsupported_media_type(error):
        return error_response('UNSUPPORTED_MEDIA_TYPE', status=415)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(
            "Internal server error",
            error=str(error),
            request_id=g.get('request_id'),
            traceback=traceback.format_exc()
        )
        return error_response('INTERNAL_ERROR', status=500)

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException) and error.code and error.code < 500:
            return error_response('VALIDATION_ERROR', error.description, status=error.code)

        logger.error(
            "Unhandled exception",
            error=str(error),
            error_type=type(error).__name__,
            request_id=g.get('request_id'),
            traceback=traceback.format_exc()
        )
        return error_response('INTERNAL_ERROR', status=500)


def safe_handler(f: Callable) -> Callable:
    """
    Decorator for safe exception handling.

    ValueError (InvalidOptions included) becomes a 400 with its message;
    anything else is logged and answered with a generic 500.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except HTTPException:
            raise
        except ValueError as e:
            logger.warning("Validation error", error=str(e), handler=f.__name__)
            return error_response('VALIDATION_ERROR', str(e), status=400)
        except Exception as e:
            logger.error(
                "Handler exception",
                error=str(e),
                handler=f.__name__,
                traceback=traceback.format_exc()
            )
            return error_response('INTERNAL_ERROR', status=500)

    return decorated
