"""
Filter tree evaluation for magicquery.

A filter is one of:
- A mapping from path to condition (keys are ANDed)
- A mapping with logical keys ($and, $or, $not, $nor)
- A list of filters (ANDed)

Field keys and logical keys may be mixed in one mapping.

Example:
    >>> record = {"role": "admin", "profile": {"age": 34}}
    >>> matches_filter(record, {"profile.age": {"$gte": 18}})
    True
    >>> matches_filter(record, {"$or": [{"role": "user"}, {"role": "admin"}]})
    True
    >>> matches_filter(record, [{"role": "admin"}, {"$not": {"profile.age": 34}}])
    False
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Mapping, Union

from ..utils.guards import is_array, is_boolean, is_object
from . import paths
from .operators import QueryOperator, matches_operators


FilterSpec = Union[Mapping[str, Any], List[Mapping[str, Any]], None]


class LogicalOperator(str, Enum):
    """Filter combinators."""
    AND = "$and"
    OR = "$or"
    NOT = "$not"
    NOR = "$nor"


LOGICAL_KEYS = frozenset(op.value for op in LogicalOperator)

_EXISTS = QueryOperator.EXISTS.value


def _match_all(record: Mapping[str, Any], filters: Any) -> bool:
    for sub in filters:
        if not matches_filter(record, sub):
            return False
    return True


def _match_logical(record: Mapping[str, Any], op: LogicalOperator, argument: Any) -> bool:
    """Evaluate one logical key. Malformed arguments are ignored."""
    if op is LogicalOperator.NOT:
        if is_object(argument):
            return not matches_filter(record, argument)
        return True
    
    if not is_array(argument):
        return True
    
    if op is LogicalOperator.AND:
        return _match_all(record, argument)
    
    if op is LogicalOperator.OR:
        for sub in argument:
            if matches_filter(record, sub):
                return True
        return False
    
    # $nor
    for sub in argument:
        if matches_filter(record, sub):
            return False
    return True


def _match_field(record: Mapping[str, Any], path: str, condition: Any) -> bool:
    """Evaluate the condition attached to one field path."""
    if is_object(condition) and _EXISTS in condition and is_boolean(condition[_EXISTS]):
        # Existence is structural: a None intermediate and a missing key
        # both resolve to MISSING but only one of them exists.
        if paths.exists(record, path) != bool(condition[_EXISTS]):
            return False
        rest = {k: v for k, v in condition.items() if k != _EXISTS}
        if not rest:
            return True
        return matches_operators(paths.resolve(record, path), rest)
    
    return matches_operators(paths.resolve(record, path), condition)


def matches_filter(record: Any, filter: FilterSpec) -> bool:
    """
    Evaluate a filter against a record.
    
    Args:
        record: The record to check (non-mappings never match)
        filter: Filter mapping, list of filters, or None (match all)
        
    Returns:
        True if record matches the filter
    """
    if not is_object(record):
        return False
    
    if filter is None:
        return True
    
    if is_array(filter):
        return _match_all(record, filter)
    
    if not is_object(filter):
        return False
    
    for key, argument in filter.items():
        if key in LOGICAL_KEYS:
            if not _match_logical(record, LogicalOperator(key), argument):
                return False
    
    for key, condition in filter.items():
        if key in LOGICAL_KEYS:
            continue
        if not _match_field(record, key, condition):
            return False
    
    return True


def create_filter_function(filter: FilterSpec) -> Callable[[Any], bool]:
    """
    Create a predicate for use with ``filter()`` or comprehensions.
    
    Args:
        filter: The filter to apply
        
    Returns:
        A callable record -> bool
    """
    if not filter:
        return lambda record: is_object(record)
    
    def filter_fn(record: Any) -> bool:
        return matches_filter(record, filter)
    
    return filter_fn
