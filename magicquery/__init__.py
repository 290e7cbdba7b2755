"""
magicquery - document-style queries over in-memory records.

Example:
    >>> from magicquery import find_many, find_first, group_by
    >>> 
    >>> users = [
    ...     {"name": "Ann", "role": "admin", "profile": {"age": 31}},
    ...     {"name": "Bob", "role": "user", "profile": {"age": 17}},
    ...     {"name": "Cid", "role": "user", "profile": {"age": 45}},
    ... ]
    >>> 
    >>> adults = find_many(users, {
    ...     "where": {"profile.age": {"$gte": 18}},
    ...     "orderBy": {"profile.age": "desc"},
    ... })
    >>> [u["name"] for u in adults]
    ['Cid', 'Ann']
    >>> 
    >>> [g.name for g in group_by(users, "role")]
    ['admin', 'user']
"""

from .core import (
    # Queries
    find_many,
    find_first,
    group_by,
    count,
    Query,
    GroupedResult,
    QueryExecutor,
    ExecutionStats,
    # Exceptions
    MagicQueryError,
    ValidationError,
    QueryError,
    InvalidQueryError,
    InvalidPatternError,
)

from .query import (
    FilterBuilder,
    QueryOperator,
    LogicalOperator,
    SortDirection,
    matches_filter,
    matches_operators,
    resolve,
    exists,
    deep_equals,
    compare_values,
    clear_caches,
)

from .utils.guards import MISSING

__version__ = "0.1.0"
__author__ = "magicquery Team"

__all__ = [
    # Queries
    "find_many",
    "find_first",
    "group_by",
    "count",
    "Query",
    "GroupedResult",
    "QueryExecutor",
    "ExecutionStats",
    # Exceptions
    "MagicQueryError",
    "ValidationError",
    "QueryError",
    "InvalidQueryError",
    "InvalidPatternError",
    # Evaluation
    "FilterBuilder",
    "QueryOperator",
    "LogicalOperator",
    "SortDirection",
    "matches_filter",
    "matches_operators",
    "resolve",
    "exists",
    "deep_equals",
    "compare_values",
    "clear_caches",
    "MISSING",
]
