"""
Amount Words Conversion Service
Validates raw input, converts it and reports a single outcome.

Callers never see exceptions from this layer; every failure becomes a
ConversionResult with a display-ready message and an error code.
"""

from decimal import Decimal
from dataclasses import dataclass, replace
from typing import Optional, Callable, Any
from threading import Lock
import structlog

from amount_words.services.converter import (
    CapitalizationStyle,
    ConversionOptions,
    InvalidOptions,
    WordsResult,
    convert,
)
from amount_words.utils.validation import validate_currency_input, ValidationResult

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred during conversion"


@dataclass(frozen=True)
class ConversionResult:
    is_success: bool
    result: Optional[str] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None
    original_value: Optional[Decimal] = None

    @classmethod
    def success(cls, result: str, original_value: Decimal) -> 'ConversionResult':
        return cls(is_success=True, result=result, original_value=original_value)

    @classmethod
    def failure(cls, message: str, code: str = 'VALIDATION_ERROR') -> 'ConversionResult':
        return cls(is_success=False, error_message=message, error_code=code)


class ConversionService:
    """
    Orchestrates validation and conversion.

    Collaborators are injectable so tests can substitute them.
    """

    def __init__(
        self,
        validator: Callable[[Optional[str]], ValidationResult] = validate_currency_input,
        converter: Callable[[Decimal, ConversionOptions], WordsResult] = convert,
        default_options: Optional[ConversionOptions] = None
    ):
        self.validator = validator
        self.converter = converter
        self.default_options = default_options or ConversionOptions()

    def convert(
        self,
        text: Optional[str],
        options: Optional[ConversionOptions] = None
    ) -> ConversionResult:
        """
        Convert raw input text to words.

        Args:
            text: User supplied amount, e.g. "123.45"
            options: Formatting options, service defaults when None
        """
        options = options or self.default_options

        try:
            logger.info("Starting conversion", input=text)

            validation = self.validator(text)
            if not validation.is_valid:
                logger.warning(
                    "Validation failed",
                    input=text,
                    error=validation.error_message
                )
                return ConversionResult.failure(validation.error_message)

            outcome = self.converter(validation.parsed_value, options)
            if not outcome.ok:
                logger.warning(
                    "Amount not supported",
                    input=text,
                    violation=outcome.failure.violation.value
                )
                return ConversionResult.failure(
                    outcome.failure.message,
                    code='UNSUPPORTED_RANGE'
                )

            logger.info(
                "Conversion succeeded",
                value=str(validation.parsed_value),
                result=outcome.phrase
            )
            return ConversionResult.success(outcome.phrase, validation.parsed_value)

        except Exception as e:
            logger.exception(
                "Unexpected conversion error",
                input=text,
                error=str(e),
                error_type=type(e).__name__
            )
            return ConversionResult.failure(UNEXPECTED_ERROR_MESSAGE, code='INTERNAL_ERROR')


def _option_name(payload: dict, key: str, default: str) -> str:
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise InvalidOptions(f"'{key}' must be a non-empty string")
    return value.strip()


def _option_flag(value: Any, key: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ('true', '1', 'yes', 'on'):
            return True
        if lowered in ('false', '0', 'no', 'off'):
            return False
    raise InvalidOptions(f"'{key}' must be a boolean")


def options_from_payload(
    payload: Optional[dict],
    defaults: Optional[ConversionOptions] = None
) -> ConversionOptions:
    """
    Build ConversionOptions from a request payload.

    Missing or null fields take the defaults. An unrecognized style falls
    back to UPPER rather than failing.

    Raises:
        InvalidOptions: If a field has the wrong type
    """
    defaults = defaults or ConversionOptions()
    if payload is None:
        return defaults
    if not isinstance(payload, dict):
        raise InvalidOptions("'options' must be an object")

    style = payload.get('style')
    return replace(
        defaults,
        whole_unit_name=_option_name(payload, 'currency_name', defaults.whole_unit_name),
        sub_unit_name=_option_name(payload, 'sub_currency_name', defaults.sub_unit_name),
        use_connector=_option_flag(
            payload.get('use_and_connector'), 'use_and_connector', defaults.use_connector
        ),
        style=defaults.style if style is None else CapitalizationStyle.parse(style),
    )


_service: Optional[ConversionService] = None
_service_lock = Lock()


def init_conversion_service(
    default_options: Optional[ConversionOptions] = None
) -> ConversionService:
    """
    Initialize the process-wide service.

    Without explicit options the defaults come from configuration.
    """
    global _service

    if default_options is None:
        from amount_words.config import get_config
        default_options = get_config().conversion.to_options()

    with _service_lock:
        _service = ConversionService(default_options=default_options)
        logger.info(
            "Conversion service initialized",
            currency_name=default_options.whole_unit_name,
            sub_currency_name=default_options.sub_unit_name,
            style=default_options.style.value
        )
        return _service


def get_conversion_service() -> ConversionService:
    """Get the process-wide service, initializing it on first use."""
    if _service is None:
        return init_conversion_service()
    return _service
