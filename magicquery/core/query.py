"""
Query model for magicquery.

A query is ``{"where": <filter>, "orderBy": {<path>: "asc" | "desc"}}``.
Both keys are optional; a missing ``where`` matches every record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from ..utils.validation import (
    validate_order_by,
    validate_query_dict,
    validate_where,
)
from .exceptions import InvalidQueryError


@dataclass
class Query:
    """
    Parsed query representation.
    
    Attributes:
        where: Filter mapping, list of filter mappings, or None
        order_by: Ordered mapping of path -> "asc" | "desc"
    """
    
    where: Any = None
    order_by: Dict[str, str] = field(default_factory=dict)
    
    def __post_init__(self):
        self.where = validate_where(self.where)
        self.order_by = validate_order_by(self.order_by)
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Query":
        """
        Create a Query from its dictionary form.
        
        Accepts ``orderBy`` or ``order_by`` for the sort specification.
        """
        validate_query_dict(data)
        order_by = data.get("orderBy", data.get("order_by"))
        return cls(where=data.get("where"), order_by=order_by)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result: Dict[str, Any] = {}
        if self.where is not None:
            result["where"] = self.where
        if self.order_by:
            result["orderBy"] = dict(self.order_by)
        return result
    
    def without_order(self) -> "Query":
        """Copy of this query with no ordering."""
        return Query(where=self.where)


QueryLike = Union[Query, Mapping[str, Any], None]


def parse_query(query: QueryLike) -> Query:
    """
    Normalize a query argument.
    
    Args:
        query: Query instance, query dictionary, or None
        
    Returns:
        Query object
        
    Raises:
        InvalidQueryError: If the query has an invalid shape
    """
    if query is None:
        return Query()
    if isinstance(query, Query):
        return query
    if isinstance(query, Mapping):
        return Query.from_dict(query)
    raise InvalidQueryError(
        f"Query must be a mapping or Query, got {type(query).__name__}"
    )


@dataclass
class GroupedResult:
    """One bucket produced by ``group_by``."""
    
    name: str
    items: List[Any] = field(default_factory=list)
    
    def __iter__(self):
        return iter(self.items)
    
    def __len__(self):
        return len(self.items)
    
    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "items": self.items}
