"""
Amount Words Conversion Routes
Number-to-words endpoints.
"""

import time
from typing import Optional
from flask import Blueprint, request, jsonify
import structlog

from amount_words.middleware import error_response, safe_handler
from amount_words.services import (
    CapitalizationStyle,
    ConversionOptions,
    MAX_AMOUNT,
    get_conversion_service,
    options_from_payload,
)
from amount_words.utils import MAX_DECIMAL_PLACES

logger = structlog.get_logger(__name__)

convert_bp = Blueprint('convert', __name__, url_prefix='/api')

# Error codes answered with a 4xx; everything else is a server fault
_CLIENT_ERROR_CODES = {'VALIDATION_ERROR', 'UNSUPPORTED_RANGE'}


def _conversion_response(text: Optional[str], options: ConversionOptions):
    started = time.perf_counter()
    result = get_conversion_service().convert(text, options)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 3)

    if not result.is_success:
        status = 400 if result.error_code in _CLIENT_ERROR_CODES else 500
        return error_response(result.error_code, result.error_message, status=status)

    return jsonify({
        'result': result.result,
        'original_value': str(result.original_value),
        'processing_time_ms': elapsed_ms
    })


@convert_bp.route('/convert', methods=['POST'])
@safe_handler
def convert_amount():
    """
    Convert an amount to words.

    Body: {"input": "123.45", "options": {"currency_name": "POUNDS",
    "sub_currency_name": "PENCE", "use_and_connector": true,
    "style": "TITLE"}}. Every option is optional.
    """
    data = request.get_json()
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return error_response('VALIDATION_ERROR', 'Request body must be a JSON object', status=400)

    text = data.get('input')

    if text is not None and not isinstance(text, str):
        return error_response(
            'VALIDATION_ERROR',
            'Input must be a string',
            status=400,
            details={'field': 'input'}
        )

    defaults = get_conversion_service().default_options
    options = options_from_payload(data.get('options'), defaults)

    return _conversion_response(text, options)


@convert_bp.route('/convert', methods=['GET'])
@safe_handler
def convert_amount_query():
    """Convert an amount given as query parameters."""
    args = request.args
    payload = {
        key: args[key]
        for key in ('currency_name', 'sub_currency_name', 'use_and_connector', 'style')
        if key in args
    }

    defaults = get_conversion_service().default_options
    options = options_from_payload(payload, defaults)

    return _conversion_response(args.get('input'), options)


@convert_bp.route('/styles', methods=['GET'])
def list_styles():
    """Supported capitalization styles and the active defaults."""
    defaults = get_conversion_service().default_options
    return jsonify({
        'styles': [style.value for style in CapitalizationStyle],
        'defaults': {
            'currency_name': defaults.whole_unit_name,
            'sub_currency_name': defaults.sub_unit_name,
            'use_and_connector': defaults.use_connector,
            'style': defaults.style.value
        },
        'limits': {
            'min_value': '0',
            'max_value': str(MAX_AMOUNT),
            'max_decimal_places': MAX_DECIMAL_PLACES
        }
    })
