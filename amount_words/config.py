"""
Amount Words Configuration Module
Environment-based configuration with safe defaults.
"""

import os
import logging
from dataclasses import dataclass, field
from functools import lru_cache

from amount_words.services.converter import CapitalizationStyle, ConversionOptions


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class ConversionConfig:
    """Defaults applied when a caller supplies no options."""

    currency_name: str = field(default_factory=lambda: os.environ.get(
        'DEFAULT_CURRENCY_NAME', 'DOLLARS'
    ))
    sub_currency_name: str = field(default_factory=lambda: os.environ.get(
        'DEFAULT_SUB_CURRENCY_NAME', 'CENTS'
    ))
    use_and_connector: bool = field(default_factory=lambda: _env_bool(
        'DEFAULT_USE_AND_CONNECTOR', 'true'
    ))
    style: str = field(default_factory=lambda: os.environ.get(
        'DEFAULT_CAPITALIZATION_STYLE', 'UPPER'
    ))

    def to_options(self) -> ConversionOptions:
        return ConversionOptions(
            whole_unit_name=self.currency_name,
            sub_unit_name=self.sub_currency_name,
            use_connector=self.use_and_connector,
            style=CapitalizationStyle.parse(self.style),
        )


@dataclass(frozen=True)
class LoggingConfig:
    """structlog output settings."""

    level: str = field(default_factory=lambda: os.environ.get('LOG_LEVEL', 'INFO').upper())
    # Console rendering is easier to read during development
    json: bool = field(default_factory=lambda: _env_bool('LOG_JSON', 'true'))


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""

    # Environment
    env: str = field(default_factory=lambda: os.environ.get('FLASK_ENV', 'production'))
    debug: bool = field(default_factory=lambda: _env_bool('FLASK_DEBUG', 'false'))

    # Server settings
    host: str = field(default_factory=lambda: os.environ.get('HOST', '0.0.0.0'))
    port: int = field(default_factory=lambda: int(os.environ.get('PORT', '5000')))

    # CORS settings
    cors_origins: list = field(default_factory=lambda: [
        origin.strip()
        for origin in os.environ.get('CORS_ORIGINS', '*').split(',')
        if origin.strip()
    ])

    @property
    def is_production(self) -> bool:
        return self.env == 'production'

    # Nested configs
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get application configuration singleton.

    Configuration is read once; tests call get_config.cache_clear()
    after changing the environment.
    """
    return AppConfig()


def validate_config(config: AppConfig) -> list[str]:
    """
    Validate configuration completeness.
    Returns list of validation errors.
    """
    errors = []

    if not config.conversion.currency_name.strip():
        errors.append("DEFAULT_CURRENCY_NAME must not be blank")
    if not config.conversion.sub_currency_name.strip():
        errors.append("DEFAULT_SUB_CURRENCY_NAME must not be blank")

    if not isinstance(logging.getLevelName(config.logging.level), int):
        errors.append(f"LOG_LEVEL '{config.logging.level}' is not a valid level")

    if not 0 < config.port < 65536:
        errors.append("PORT must be between 1 and 65535")

    if config.is_production and config.debug:
        errors.append("FLASK_DEBUG must be false in production")

    return errors


def config_warnings(config: AppConfig) -> list[str]:
    """
    Report settings that are tolerated but fall back to a default.

    An unrecognized style converts in upper case instead of failing startup.
    """
    warnings = []

    if not CapitalizationStyle.is_known(config.conversion.style):
        warnings.append(
            f"DEFAULT_CAPITALIZATION_STYLE '{config.conversion.style}' is not recognized, using UPPER"
        )

    return warnings
