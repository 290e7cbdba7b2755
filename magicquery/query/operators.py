"""
Field-level operator evaluation.

Supports:
- Comparison operators ($eq, $ne, $gt, $gte, $lt, $lte, $between)
- Membership operators ($in, $nin)
- String operators ($contains, $startsWith, $endsWith, $regex)
- Array operators ($contains, $all, $size, $elemMatch)
- Existence ($exists)
- Nested field checks (non-$ keys descend into the value)

Example:
    >>> matches_operators(42, {"$gte": 18, "$lt": 65})
    True
    >>> matches_operators("Alice", {"$startsWith": "al"})
    True
    >>> matches_operators({"city": "Berlin"}, {"city": "Berlin"})
    True
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..utils.guards import (
    MISSING,
    is_array,
    is_boolean,
    is_number,
    is_object,
    is_string,
)
from .cache import get_cached_regex
from .comparator import (
    contains_equal,
    deep_equals,
    is_between,
    is_greater_than,
    is_greater_than_or_equal,
    is_less_than,
    is_less_than_or_equal,
)


REGEX_FLAGS = re.IGNORECASE


class QueryOperator(str, Enum):
    """Field condition operators."""
    
    # Equality
    EQ = "$eq"
    NE = "$ne"
    
    # Ordering
    GT = "$gt"
    GTE = "$gte"
    LT = "$lt"
    LTE = "$lte"
    BETWEEN = "$between"
    
    # Membership
    IN = "$in"
    NIN = "$nin"
    
    # Strings and arrays
    CONTAINS = "$contains"
    STARTS_WITH = "$startsWith"
    ENDS_WITH = "$endsWith"
    REGEX = "$regex"
    ALL = "$all"
    SIZE = "$size"
    ELEM_MATCH = "$elemMatch"
    
    # Existence
    EXISTS = "$exists"
    
    @classmethod
    def lookup(cls, key: str) -> Optional["QueryOperator"]:
        """Return the operator for key, or None if key is not recognized."""
        return _OPERATOR_KEYS.get(key)


_OPERATOR_KEYS: Dict[str, QueryOperator] = {op.value: op for op in QueryOperator}


def is_operator_key(key: Any) -> bool:
    """True for keys using the operator sigil ($...)."""
    return isinstance(key, str) and key.startswith("$")


# =============================================================================
# OPERATOR HANDLERS
# =============================================================================

def _op_eq(value: Any, condition: Any) -> bool:
    return deep_equals(value, condition)


def _op_ne(value: Any, condition: Any) -> bool:
    return not deep_equals(value, condition)


def _op_in(value: Any, condition: Any) -> bool:
    if not is_array(condition) or len(condition) == 0:
        return False
    return contains_equal(condition, value)


def _op_nin(value: Any, condition: Any) -> bool:
    if not is_array(condition):
        return False
    return not contains_equal(condition, value)


def _op_contains(value: Any, condition: Any) -> bool:
    if is_string(value):
        return is_string(condition) and condition.lower() in value.lower()
    
    if not is_array(value):
        return False
    
    if is_string(condition):
        needle = condition.lower()
        for item in value:
            if is_string(item) and needle in item.lower():
                return True
    
    return contains_equal(value, condition)


def _op_all(value: Any, condition: Any) -> bool:
    if not is_array(value) or not is_array(condition):
        return False
    for needle in condition:
        if not contains_equal(value, needle):
            return False
    return True


def _op_size(value: Any, condition: Any) -> bool:
    if not is_number(condition) or condition < 0:
        return False
    if not (is_array(value) or is_string(value)):
        return False
    return len(value) == condition


def _op_exists(value: Any, condition: Any) -> bool:
    if not is_boolean(condition):
        return False
    return (value is not MISSING) == bool(condition)


def _op_starts_with(value: Any, condition: Any) -> bool:
    return (
        is_string(value)
        and is_string(condition)
        and value.lower().startswith(condition.lower())
    )


def _op_ends_with(value: Any, condition: Any) -> bool:
    return (
        is_string(value)
        and is_string(condition)
        and value.lower().endswith(condition.lower())
    )


def _op_regex(value: Any, condition: Any) -> bool:
    if not (is_string(value) and is_string(condition)):
        return False
    # Invalid patterns raise InvalidPatternError from the cache
    return get_cached_regex(condition, REGEX_FLAGS).search(value) is not None


def _op_between(value: Any, condition: Any) -> bool:
    if is_array(condition):
        if len(condition) != 2:
            return False
        low, high = condition[0], condition[1]
    elif is_object(condition):
        low, high = condition.get("min", MISSING), condition.get("max", MISSING)
    else:
        return False
    return is_between(value, low, high)


def _op_elem_match(value: Any, condition: Any) -> bool:
    from .filters import matches_filter
    
    if not is_array(value):
        return False
    for element in value:
        if is_object(element) and matches_filter(element, condition):
            return True
    return False


_HANDLERS: Dict[QueryOperator, Callable[[Any, Any], bool]] = {
    QueryOperator.EQ: _op_eq,
    QueryOperator.NE: _op_ne,
    QueryOperator.GT: is_greater_than,
    QueryOperator.GTE: is_greater_than_or_equal,
    QueryOperator.LT: is_less_than,
    QueryOperator.LTE: is_less_than_or_equal,
    QueryOperator.BETWEEN: _op_between,
    QueryOperator.IN: _op_in,
    QueryOperator.NIN: _op_nin,
    QueryOperator.CONTAINS: _op_contains,
    QueryOperator.STARTS_WITH: _op_starts_with,
    QueryOperator.ENDS_WITH: _op_ends_with,
    QueryOperator.REGEX: _op_regex,
    QueryOperator.ALL: _op_all,
    QueryOperator.SIZE: _op_size,
    QueryOperator.ELEM_MATCH: _op_elem_match,
    QueryOperator.EXISTS: _op_exists,
}

_unhandled = set(QueryOperator) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(f"Operators without a handler: {sorted(_unhandled)}")


def matches_operators(value: Any, condition: Any) -> bool:
    """
    Evaluate a field value against a condition.
    
    A condition that is not a mapping is a literal and is compared with
    deep equality. A mapping condition is an implicit AND over its keys:
    ``$`` keys are operators (unknown ones are ignored), other keys
    descend into ``value[key]``.
    
    Args:
        value: The resolved field value (may be MISSING)
        condition: Literal or operator mapping
        
    Returns:
        True if value satisfies every part of condition
    """
    if not is_object(condition):
        return deep_equals(value, condition)
    
    for key, argument in condition.items():
        if is_operator_key(key):
            op = QueryOperator.lookup(key)
            if op is None:
                continue
            if not _HANDLERS[op](value, argument):
                return False
        elif is_object(value):
            if not matches_operators(value.get(key, MISSING), argument):
                return False
        elif not deep_equals(value, argument):
            return False
    
    return True
