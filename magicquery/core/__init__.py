"""
Core query engine components.
"""

from .exceptions import (
    MagicQueryError,
    ValidationError,
    QueryError,
    InvalidQueryError,
    InvalidPatternError,
)
from .query import Query, GroupedResult, parse_query
from .engine import (
    QueryExecutor,
    ExecutionStats,
    find_many,
    find_first,
    group_by,
    count,
    get_default_executor,
)

__all__ = [
    # Exceptions
    "MagicQueryError",
    "ValidationError",
    "QueryError",
    "InvalidQueryError",
    "InvalidPatternError",
    # Query model
    "Query",
    "GroupedResult",
    "parse_query",
    # Execution
    "QueryExecutor",
    "ExecutionStats",
    "find_many",
    "find_first",
    "group_by",
    "count",
    "get_default_executor",
]
