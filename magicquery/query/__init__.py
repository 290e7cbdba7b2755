"""
Filter evaluation module for magicquery.

This module provides:
- Path resolution with cached accessors
- Operator matching for single field values
- Filter tree evaluation with logical combinators
- Value comparison and deep equality
- Multi-key sorting
- A fluent filter builder

Example:
    >>> from magicquery.query import FilterBuilder, matches_filter
    >>> 
    >>> where = FilterBuilder().field("price").lt(100).build()
    >>> matches_filter({"price": 42}, where)
    True
"""

from .cache import (
    RegexCache,
    LRUCache,
    get_cached_regex,
    configure_caches,
    clear_caches,
    cache_info,
)

from .comparator import (
    compare_values,
    deep_equals,
    is_between,
)

from .paths import resolve, exists

from .operators import (
    QueryOperator,
    matches_operators,
)

from .filters import (
    LogicalOperator,
    matches_filter,
    create_filter_function,
)

from .sorting import SortDirection, apply_sorting

from .builder import FilterBuilder, FieldFilterBuilder

__all__ = [
    # Caches
    "RegexCache",
    "LRUCache",
    "get_cached_regex",
    "configure_caches",
    "clear_caches",
    "cache_info",
    # Comparison
    "compare_values",
    "deep_equals",
    "is_between",
    # Paths
    "resolve",
    "exists",
    # Operators
    "QueryOperator",
    "matches_operators",
    # Filters
    "LogicalOperator",
    "matches_filter",
    "create_filter_function",
    # Sorting
    "SortDirection",
    "apply_sorting",
    # Builder
    "FilterBuilder",
    "FieldFilterBuilder",
]
