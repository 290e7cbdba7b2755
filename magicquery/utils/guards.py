"""
Type guards used by the query engine.

Records are plain Python data, so "object", "array" and "date" are
defined in terms of the standard containers plus numpy scalars.
"""

from __future__ import annotations

import datetime as _dt
import re
from collections.abc import Mapping
from typing import Any

import numpy as np


class _Missing:
    """Sentinel for a value that is absent from a record."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __bool__(self) -> bool:
        return False
    
    def __repr__(self) -> str:
        return "<MISSING>"
    
    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def is_missing(value: Any) -> bool:
    """Check if value is the absent sentinel."""
    return value is MISSING


def is_null_or_missing(value: Any) -> bool:
    """Check if value is None or absent."""
    return value is None or value is MISSING


def is_object(value: Any) -> bool:
    """Check if value is a mapping (a nested record)."""
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    """Check if value is a list, tuple or numpy array."""
    return isinstance(value, (list, tuple, np.ndarray))


def is_boolean(value: Any) -> bool:
    """Check if value is a Python or numpy boolean."""
    return isinstance(value, (bool, np.bool_))


def is_string(value: Any) -> bool:
    """Check if value is a string."""
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """
    Check if value is a real number.
    
    Booleans are excluded even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def is_nan(value: Any) -> bool:
    """Check if value is a NaN float."""
    return isinstance(value, (float, np.floating)) and bool(np.isnan(value))


def is_date(value: Any) -> bool:
    """Check if value is a valid date or datetime (NaT is not a date)."""
    if isinstance(value, np.datetime64):
        return not np.isnat(value)
    return isinstance(value, _dt.date)


def is_regex(value: Any) -> bool:
    """Check if value is a compiled regular expression."""
    return isinstance(value, re.Pattern)


def to_instant(value: Any) -> float:
    """
    Convert a date value to seconds since the epoch.
    
    Naive datetimes and plain dates are interpreted as UTC so that any two
    dates can be ordered.
    
    Args:
        value: A value for which ``is_date`` is True
        
    Returns:
        POSIX timestamp as a float
    """
    if isinstance(value, np.datetime64):
        micros = value.astype("datetime64[us]").astype(np.int64)
        return float(micros) / 1e6
    if isinstance(value, _dt.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=_dt.timezone.utc)
        return value.timestamp()
    return _dt.datetime(
        value.year, value.month, value.day, tzinfo=_dt.timezone.utc
    ).timestamp()
