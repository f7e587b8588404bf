"""
Amount Words Health Routes
Health check and orchestrator probes.
"""

from flask import Blueprint, jsonify
import structlog

from amount_words.services import get_conversion_service

logger = structlog.get_logger(__name__)

health_bp = Blueprint('health', __name__)

SELF_CHECK_INPUT = "0"


@health_bp.route('/health', methods=['GET'])
def health():
    """
    Health check endpoint.

    Runs a conversion of "0" through the full service. Returns 200 if
    healthy, 503 if degraded.
    """
    status = {
        'status': 'healthy',
        'checks': {}
    }

    result = get_conversion_service().convert(SELF_CHECK_INPUT)
    status['checks']['converter'] = {'healthy': result.is_success}

    if not result.is_success:
        logger.error("Converter self-check failed", error=result.error_message)
        status['checks']['converter']['error'] = 'Converter self-check failed'
        status['status'] = 'degraded'
        return jsonify(status), 503

    return jsonify(status), 200


@health_bp.route('/ready', methods=['GET'])
def ready():
    """
    Readiness probe for orchestrators.

    Returns 200 if app is ready to accept traffic.
    """
    return jsonify({'ready': True}), 200


@health_bp.route('/live', methods=['GET'])
def live():
    """Liveness probe for orchestrators."""
    return jsonify({'alive': True}), 200
