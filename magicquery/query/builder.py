"""
Fluent construction of filter mappings.

Example:
    >>> where = (
    ...     FilterBuilder()
    ...     .field("category").equals("electronics")
    ...     .field("price").gte(10).lte(100)
    ...     .field("tags").all_(["sale", "new"])
    ...     .build()
    ... )
    >>> where
    {'category': {'$eq': 'electronics'}, 'price': {'$gte': 10, '$lte': 100}, 'tags': {'$all': ['sale', 'new']}}
"""

from __future__ import annotations

from typing import Any, Dict, List

from .filters import LogicalOperator
from .operators import QueryOperator


class FieldFilterBuilder:
    """Builder for the conditions of a single field."""
    
    def __init__(self, parent: "FilterBuilder", field: str):
        self._parent = parent
        self._field = field
    
    def _add(self, op: QueryOperator, value: Any) -> "FieldFilterBuilder":
        self._parent._add_condition(self._field, op, value)
        return self
    
    def field(self, name: str) -> "FieldFilterBuilder":
        """Start building conditions for another field."""
        return self._parent.field(name)
    
    def build(self) -> Dict[str, Any]:
        """Build the final filter."""
        return self._parent.build()
    
    def equals(self, value: Any) -> "FieldFilterBuilder":
        return self._add(QueryOperator.EQ, value)
    
    def eq(self, value: Any) -> "FieldFilterBuilder":
        """Alias for equals."""
        return self.equals(value)
    
    def not_equals(self, value: Any) -> "FieldFilterBuilder":
        return self._add(QueryOperator.NE, value)
    
    def ne(self, value: Any) -> "FieldFilterBuilder":
        """Alias for not_equals."""
        return self.not_equals(value)
    
    def gt(self, value: Any) -> "FieldFilterBuilder":
        return self._add(QueryOperator.GT, value)
    
    def gte(self, value: Any) -> "FieldFilterBuilder":
        return self._add(QueryOperator.GTE, value)
    
    def lt(self, value: Any) -> "FieldFilterBuilder":
        return self._add(QueryOperator.LT, value)
    
    def lte(self, value: Any) -> "FieldFilterBuilder":
        return self._add(QueryOperator.LTE, value)
    
    def between(self, low: Any, high: Any) -> "FieldFilterBuilder":
        """Field between low and high (inclusive)."""
        return self._add(QueryOperator.BETWEEN, [low, high])
    
    def in_(self, values: List[Any]) -> "FieldFilterBuilder":
        return self._add(QueryOperator.IN, list(values))
    
    def not_in(self, values: List[Any]) -> "FieldFilterBuilder":
        return self._add(QueryOperator.NIN, list(values))
    
    def contains(self, value: Any) -> "FieldFilterBuilder":
        """Case-insensitive substring, or array element membership."""
        return self._add(QueryOperator.CONTAINS, value)
    
    def all_(self, values: List[Any]) -> "FieldFilterBuilder":
        """Array field contains all of values."""
        return self._add(QueryOperator.ALL, list(values))
    
    def size(self, length: int) -> "FieldFilterBuilder":
        return self._add(QueryOperator.SIZE, length)
    
    def startswith(self, value: str) -> "FieldFilterBuilder":
        return self._add(QueryOperator.STARTS_WITH, value)
    
    def endswith(self, value: str) -> "FieldFilterBuilder":
        return self._add(QueryOperator.ENDS_WITH, value)
    
    def regex(self, pattern: str) -> "FieldFilterBuilder":
        return self._add(QueryOperator.REGEX, pattern)
    
    def exists(self, exists: bool = True) -> "FieldFilterBuilder":
        return self._add(QueryOperator.EXISTS, exists)
    
    def elem_match(self, sub_filter: Dict[str, Any]) -> "FieldFilterBuilder":
        """Some element of the array field matches sub_filter."""
        return self._add(QueryOperator.ELEM_MATCH, sub_filter)


class FilterBuilder:
    """
    Fluent builder for filter mappings.
    
    Conditions on the same field are merged into one operator mapping.
    By default fields are ANDed; call ``or_()`` to combine them with $or.
    """
    
    def __init__(self):
        self._conditions: Dict[str, Dict[str, Any]] = {}
        self._logic = LogicalOperator.AND
    
    def field(self, name: str) -> FieldFilterBuilder:
        """Start building conditions for a field."""
        return FieldFilterBuilder(self, name)
    
    def _add_condition(self, field: str, op: QueryOperator, value: Any) -> None:
        self._conditions.setdefault(field, {})[op.value] = value
    
    def or_(self) -> "FilterBuilder":
        """Combine fields with $or."""
        self._logic = LogicalOperator.OR
        return self
    
    def and_(self) -> "FilterBuilder":
        """Combine fields with AND (default)."""
        self._logic = LogicalOperator.AND
        return self
    
    def build(self) -> Dict[str, Any]:
        """Build the final filter (empty mapping when no conditions)."""
        if self._logic is LogicalOperator.OR and len(self._conditions) > 1:
            return {
                LogicalOperator.OR.value: [
                    {field: dict(ops)} for field, ops in self._conditions.items()
                ]
            }
        return {field: dict(ops) for field, ops in self._conditions.items()}
