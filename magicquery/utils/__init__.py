"""
Utility functions for magicquery.
"""

from .logging import setup_logger, get_logger, LogContext
from .guards import (
    MISSING,
    is_missing,
    is_null_or_missing,
    is_object,
    is_array,
    is_boolean,
    is_string,
    is_number,
    is_date,
    is_regex,
)
from .validation import (
    validate_path,
    validate_where,
    validate_order_by,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "LogContext",
    "MISSING",
    "is_missing",
    "is_null_or_missing",
    "is_object",
    "is_array",
    "is_boolean",
    "is_string",
    "is_number",
    "is_date",
    "is_regex",
    "validate_path",
    "validate_where",
    "validate_order_by",
]
