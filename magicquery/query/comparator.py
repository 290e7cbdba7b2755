"""
Value comparison for magicquery.

Provides:
- A total ordering over heterogeneous values (used by sorting)
- Type-homogeneous range comparisons (used by $gt/$gte/$lt/$lte/$between)
- Deep equality with cycle detection (used by $eq/$ne/$in/$all/...)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Set, Tuple

from ..utils.guards import (
    MISSING,
    is_array,
    is_boolean,
    is_date,
    is_nan,
    is_number,
    is_object,
    is_regex,
    is_string,
    to_instant,
)


def _cmp(a: Any, b: Any) -> int:
    # numpy comparisons return np.bool_, which does not support subtraction
    return int(a > b) - int(a < b)


def _compare_numbers(a: Any, b: Any) -> int:
    """Numeric comparison where NaN sorts after every number."""
    a_nan, b_nan = is_nan(a), is_nan(b)
    if a_nan and b_nan:
        return 0
    if a_nan:
        return 1
    if b_nan:
        return -1
    return _cmp(a, b)


def compare_values(a: Any, b: Any) -> int:
    """
    Compare two values for sorting.
    
    Values of the same kind (string, number, boolean, date) compare
    naturally; anything else falls back to comparing ``str()`` forms.
    
    Args:
        a: First value
        b: Second value
        
    Returns:
        Negative, zero or positive like a classic ``cmp``
    """
    if a is b:
        return 0
    
    if is_string(a) and is_string(b):
        return _cmp(a, b)
    
    if is_number(a) and is_number(b):
        return _compare_numbers(a, b)
    
    if is_boolean(a) and is_boolean(b):
        return int(bool(a)) - int(bool(b))
    
    if is_date(a) and is_date(b):
        return _cmp(to_instant(a), to_instant(b))
    
    return _cmp(str(a), str(b))


# =============================================================================
# RANGE COMPARISONS
# =============================================================================

def _ordered_pair(a: Any, b: Any) -> Optional[Tuple[Any, Any]]:
    """Return a comparable pair if a and b are of the same orderable kind."""
    if is_number(a) and is_number(b):
        return a, b
    if is_string(a) and is_string(b):
        return a, b
    if is_date(a) and is_date(b):
        return to_instant(a), to_instant(b)
    return None


def is_greater_than(a: Any, b: Any) -> bool:
    pair = _ordered_pair(a, b)
    return pair is not None and bool(pair[0] > pair[1])


def is_greater_than_or_equal(a: Any, b: Any) -> bool:
    pair = _ordered_pair(a, b)
    return pair is not None and bool(pair[0] >= pair[1])


def is_less_than(a: Any, b: Any) -> bool:
    pair = _ordered_pair(a, b)
    return pair is not None and bool(pair[0] < pair[1])


def is_less_than_or_equal(a: Any, b: Any) -> bool:
    pair = _ordered_pair(a, b)
    return pair is not None and bool(pair[0] <= pair[1])


def is_between(value: Any, low: Any, high: Any) -> bool:
    """Inclusive range check; value, low and high must share a kind."""
    lower = _ordered_pair(value, low)
    upper = _ordered_pair(value, high)
    if lower is None or upper is None:
        return False
    return bool(lower[0] >= lower[1]) and bool(upper[0] <= upper[1])


# =============================================================================
# DEEP EQUALITY
# =============================================================================

def deep_equals(a: Any, b: Any, _seen: Optional[Set[Tuple[int, int]]] = None) -> bool:
    """
    Structural equality between two values.
    
    - Sequences: same length, element-wise equal in order
    - Mappings: same key set, recursively equal values
    - Dates: same instant
    - Compiled patterns: same pattern and flags
    - Booleans never equal numbers; NaN equals NaN
    - Other values: ``==``, then matching ``str()`` for same-typed objects
    
    A pair of containers already being compared further up the stack is
    treated as equal, so cyclic structures terminate.
    
    Args:
        a: First value
        b: Second value
        
    Returns:
        True if the values are deeply equal
    """
    if a is b:
        return True
    if a is None or b is None or a is MISSING or b is MISSING:
        return False
    
    if is_boolean(a) or is_boolean(b):
        return is_boolean(a) and is_boolean(b) and bool(a) == bool(b)
    
    if is_number(a) or is_number(b):
        if not (is_number(a) and is_number(b)):
            return False
        if is_nan(a) or is_nan(b):
            return is_nan(a) and is_nan(b)
        return bool(a == b)
    
    if is_string(a) or is_string(b):
        return is_string(a) and is_string(b) and a == b
    
    if is_date(a) or is_date(b):
        return is_date(a) and is_date(b) and to_instant(a) == to_instant(b)
    
    if is_regex(a) or is_regex(b):
        return (
            is_regex(a) and is_regex(b)
            and a.pattern == b.pattern
            and a.flags == b.flags
        )
    
    if is_array(a) or is_array(b) or is_object(a) or is_object(b):
        if _seen is None:
            _seen = set()
        marker = (id(a), id(b))
        if marker in _seen:
            return True
        _seen.add(marker)
        try:
            if is_array(a) and is_array(b):
                return _sequences_equal(a, b, _seen)
            if is_object(a) and is_object(b):
                return _mappings_equal(a, b, _seen)
            return False
        finally:
            _seen.discard(marker)
    
    if type(a) is not type(b):
        return False
    if a == b:
        return True
    return type(a).__str__ is not object.__str__ and str(a) == str(b)


def _sequences_equal(a: Any, b: Any, seen: Set[Tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if not deep_equals(x, y, seen):
            return False
    return True


def _mappings_equal(a: Mapping, b: Mapping, seen: Set[Tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if key not in b:
            return False
        if not deep_equals(value, b[key], seen):
            return False
    return True


def contains_equal(haystack: Any, needle: Any) -> bool:
    """True if any element of haystack deep-equals needle."""
    for item in haystack:
        if deep_equals(item, needle):
            return True
    return False
