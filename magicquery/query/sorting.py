"""
Multi-key ordering of query results.
"""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Any, List, Mapping, Sequence, Tuple

from ..utils.guards import is_null_or_missing
from .comparator import compare_values
from .paths import resolve


class SortDirection(str, Enum):
    """Sort direction for an orderBy entry."""
    ASC = "asc"
    DESC = "desc"


def _compare_keys(
    a: Tuple[Any, ...],
    b: Tuple[Any, ...],
    directions: Sequence[SortDirection],
) -> int:
    for a_value, b_value, direction in zip(a, b, directions):
        a_null = is_null_or_missing(a_value)
        b_null = is_null_or_missing(b_value)
        
        # Nulls go last in both directions
        if a_null and b_null:
            continue
        if a_null:
            return 1
        if b_null:
            return -1
        
        comparison = compare_values(a_value, b_value)
        if comparison != 0:
            return -comparison if direction is SortDirection.DESC else comparison
    return 0


def apply_sorting(items: Sequence[Any], order_by: Mapping[str, Any]) -> List[Any]:
    """
    Sort records by one or more paths.
    
    Entries of ``order_by`` are applied in insertion order as successive
    tie-breakers. The sort is stable, so records that compare equal on
    every key keep their input order.
    
    Args:
        items: Records to sort (not modified)
        order_by: Mapping of path -> "asc" | "desc"
        
    Returns:
        New list in sorted order
    """
    if not order_by:
        return list(items)
    
    fields = list(order_by.keys())
    directions = [SortDirection(d) for d in order_by.values()]
    
    keyed = [
        (tuple(resolve(item, field) for field in fields), item)
        for item in items
    ]
    keyed.sort(key=cmp_to_key(lambda x, y: _compare_keys(x[0], y[0], directions)))
    
    return [item for _, item in keyed]
