"""
Input Validation Utilities
Validation helpers for CLI inputs
"""

from typing import Optional

from webpconvert.core.constants import (
    DEFAULT_OUTPUT_FORMAT,
    FORMAT_ALIASES,
    SUPPORTED_OUTPUT_FORMATS,
)
from webpconvert.models.conversion import OutputFormat
from webpconvert.utils.logging import get_logger

logger = get_logger(__name__)


def normalize_format(format_str: Optional[str]) -> OutputFormat:
    """Resolve a requested output format, accepting ``j``/``p`` shorthands.

    Unknown values are not an error: a warning is logged and jpg is used.
    """
    if not format_str:
        return OutputFormat(DEFAULT_OUTPUT_FORMAT)

    value = format_str.strip().lower()
    value = FORMAT_ALIASES.get(value, value)
    if value in SUPPORTED_OUTPUT_FORMATS:
        return OutputFormat(value)

    logger.warning(
        f"Invalid format: {format_str}. Using {DEFAULT_OUTPUT_FORMAT} as default."
    )
    return OutputFormat(DEFAULT_OUTPUT_FORMAT)
