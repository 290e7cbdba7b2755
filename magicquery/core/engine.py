"""
Query execution for magicquery.

Runs queries against in-memory collections of records.

Features:
- Filtering with document-style operators
- Stable multi-key ordering
- Grouping by a path
- Execution statistics for the last call

Example:
    >>> users = [{"name": "Ann", "age": 31}, {"name": "Bob", "age": 17}]
    >>> find_many(users, {"where": {"age": {"$gte": 18}}})
    [{'name': 'Ann', 'age': 31}]
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..query.comparator import deep_equals
from ..query.filters import LOGICAL_KEYS, matches_filter
from ..query.paths import resolve
from ..query.sorting import apply_sorting
from ..utils.guards import MISSING, is_array, is_date, is_object, is_null_or_missing
from ..utils.logging import get_logger
from ..utils.validation import validate_path
from .query import GroupedResult, Query, QueryLike, parse_query


logger = get_logger(__name__)

UNDEFINED_GROUP = "undefined"


@dataclass
class ExecutionStats:
    """
    Statistics from query execution.
    """
    
    # Timing
    total_time_ms: float = 0.0
    filter_time_ms: float = 0.0
    sort_time_ms: float = 0.0
    
    # Counts
    records_scanned: int = 0
    records_matched: int = 0
    records_returned: int = 0
    
    # Plan info
    operation: Optional[str] = None
    used_fast_path: bool = False
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_time_ms": self.total_time_ms,
            "filter_time_ms": self.filter_time_ms,
            "sort_time_ms": self.sort_time_ms,
            "records_scanned": self.records_scanned,
            "records_matched": self.records_matched,
            "records_returned": self.records_returned,
            "operation": self.operation,
            "used_fast_path": self.used_fast_path,
        }


def _fast_equality_predicate(where: Any) -> Optional[Callable[[Any], bool]]:
    """
    Build a direct predicate for ``{"field": <primitive>}``.
    
    Returns None when the where clause needs the general evaluator.
    """
    if not is_object(where) or len(where) != 1:
        return None
    
    (field, condition), = where.items()
    if not isinstance(field, str) or "." in field or field in LOGICAL_KEYS:
        return None
    if is_object(condition) or is_array(condition) or is_date(condition):
        return None
    
    def predicate(record: Any) -> bool:
        return is_object(record) and deep_equals(record.get(field, MISSING), condition)
    
    return predicate


def group_name(value: Any) -> str:
    """String key of a group; None and absent values share one group."""
    if is_null_or_missing(value):
        return UNDEFINED_GROUP
    return str(value)


class QueryExecutor:
    """
    Executes queries against collections of records.
    
    Example:
        >>> executor = QueryExecutor()
        >>> executor.find_many(records, {"where": {"active": True}})
        >>> executor.last_stats.records_matched
    """
    
    def __init__(self):
        self.last_stats = ExecutionStats()
    
    def _predicate(self, query: Query, stats: ExecutionStats) -> Callable[[Any], bool]:
        fast = _fast_equality_predicate(query.where)
        if fast is not None:
            stats.used_fast_path = True
            return fast
        where = query.where
        return lambda record: matches_filter(record, where)
    
    def _finish(self, stats: ExecutionStats, start: float) -> None:
        stats.total_time_ms = (time.perf_counter() - start) * 1000
        self.last_stats = stats
        logger.debug(f"{stats.operation}: {stats.to_dict()}")
    
    def find_many(self, records: Iterable[Any], query: QueryLike = None) -> List[Any]:
        """
        Find all records matching a query.
        
        Args:
            records: Records to search
            query: Query or query dictionary with optional where/orderBy
            
        Returns:
            Matching records (same objects, not copies), sorted when
            orderBy is given, otherwise in input order
        """
        start = time.perf_counter()
        parsed = parse_query(query)
        stats = ExecutionStats(operation="find_many")
        
        predicate = self._predicate(parsed, stats)
        result = []
        for record in records:
            stats.records_scanned += 1
            if predicate(record):
                result.append(record)
        stats.records_matched = len(result)
        stats.filter_time_ms = (time.perf_counter() - start) * 1000
        
        if parsed.order_by:
            sort_start = time.perf_counter()
            result = apply_sorting(result, parsed.order_by)
            stats.sort_time_ms = (time.perf_counter() - sort_start) * 1000
        
        stats.records_returned = len(result)
        self._finish(stats, start)
        return result
    
    def find_first(self, records: Iterable[Any], query: QueryLike = None) -> Optional[Any]:
        """
        Find the first record, in input order, matching a query.
        
        ``orderBy`` is accepted but ignored: this returns the same record
        as ``find_many`` with the same where clause and no ordering.
        
        Args:
            records: Records to search
            query: Query or query dictionary
            
        Returns:
            The first matching record, or None
        """
        start = time.perf_counter()
        parsed = parse_query(query).without_order()
        stats = ExecutionStats(operation="find_first")
        
        predicate = self._predicate(parsed, stats)
        found = None
        for record in records:
            stats.records_scanned += 1
            if predicate(record):
                found = record
                stats.records_matched = stats.records_returned = 1
                break
        
        stats.filter_time_ms = (time.perf_counter() - start) * 1000
        self._finish(stats, start)
        return found
    
    def count(self, records: Iterable[Any], query: QueryLike = None) -> int:
        """Count records matching the where clause of a query."""
        start = time.perf_counter()
        parsed = parse_query(query)
        stats = ExecutionStats(operation="count")
        
        predicate = self._predicate(parsed, stats)
        for record in records:
            stats.records_scanned += 1
            if predicate(record):
                stats.records_matched += 1
        
        stats.filter_time_ms = (time.perf_counter() - start) * 1000
        self._finish(stats, start)
        return stats.records_matched
    
    def group_by(
        self,
        records: Iterable[Any],
        path: str,
        query: QueryLike = None,
    ) -> List[GroupedResult]:
        """
        Filter and sort records, then bucket them by the value at path.
        
        Groups appear in first-seen order and keep the order of
        ``find_many`` within each group. Records where path is absent or
        None land in the "undefined" group.
        
        Args:
            records: Records to group
            path: Dot-separated path of the grouping value
            query: Optional query applied before grouping
            
        Returns:
            List of GroupedResult
        """
        validate_path(path)
        matched = self.find_many(records, query)
        
        groups: Dict[str, GroupedResult] = {}
        for record in matched:
            name = group_name(resolve(record, path))
            group = groups.get(name)
            if group is None:
                group = groups[name] = GroupedResult(name=name)
            group.items.append(record)
        
        self.last_stats.operation = "group_by"
        return list(groups.values())


_default_executor = QueryExecutor()


def get_default_executor() -> QueryExecutor:
    """Return the process-wide executor used by the module-level functions."""
    return _default_executor


def find_many(records: Iterable[Any], query: QueryLike = None) -> List[Any]:
    """Find all records matching query. See ``QueryExecutor.find_many``."""
    return _default_executor.find_many(records, query)


def find_first(records: Iterable[Any], query: QueryLike = None) -> Optional[Any]:
    """Find the first record matching query. See ``QueryExecutor.find_first``."""
    return _default_executor.find_first(records, query)


def count(records: Iterable[Any], query: QueryLike = None) -> int:
    """Count records matching query."""
    return _default_executor.count(records, query)


def group_by(
    records: Iterable[Any],
    path: str,
    query: QueryLike = None,
) -> List[GroupedResult]:
    """Group matching records by path. See ``QueryExecutor.group_by``."""
    return _default_executor.group_by(records, path, query)
