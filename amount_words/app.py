"""
Amount Words Flask Application
Application factory for the conversion API.
"""

import sys
import time
import logging
from typing import Optional
from flask import Flask, g
from flask_cors import CORS
import structlog

from amount_words.config import (
    AppConfig,
    LoggingConfig,
    config_warnings,
    get_config,
    validate_config,
)
from amount_words.middleware import register_error_handlers
from amount_words.routes import convert_bp, health_bp
from amount_words.services import init_conversion_service
from amount_words.utils import generate_request_id

logger = structlog.get_logger(__name__)


def configure_logging(config: LoggingConfig) -> None:
    """Route structlog through stdlib logging at the configured level."""
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """
    Flask application factory.

    Args:
        config: Explicit configuration, read from the environment when None
    """
    config = config or get_config()
    configure_logging(config.logging)

    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.critical("Configuration error", error=error)
        if config.is_production:
            sys.exit(1)

    for warning in config_warnings(config):
        logger.warning("Configuration fallback", warning=warning)

    app = Flask(__name__)

    CORS(app, origins=config.cors_origins)

    init_conversion_service(config.conversion.to_options())

    register_error_handlers(app)

    @app.before_request
    def before_request():
        """Set up request context."""
        g.request_id = generate_request_id()
        g.started_at = time.perf_counter()

    @app.after_request
    def after_request(response):
        """Add tracking and security headers."""
        response.headers['X-Request-ID'] = g.get('request_id', 'unknown')
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'

        started_at = g.get('started_at')
        if started_at is not None:
            elapsed_ms = (time.perf_counter() - started_at) * 1000
            response.headers['X-Processing-Time-Ms'] = f"{elapsed_ms:.3f}"
        return response

    app.register_blueprint(health_bp)
    app.register_blueprint(convert_bp)

    logger.info(
        "Application initialized",
        env=config.env,
        debug=config.debug
    )

    return app
