"""
Input validation utilities.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..core.exceptions import InvalidQueryError


VALID_DIRECTIONS = ("asc", "desc")

# Keys accepted in a query dictionary
QUERY_KEYS = {"where", "orderBy", "order_by"}


def validate_path(path: Any) -> str:
    """
    Validate a dot-separated record path.
    
    Raises:
        InvalidQueryError: If path is not a non-empty string
    """
    if not isinstance(path, str):
        raise InvalidQueryError(f"Path must be a string, got {type(path).__name__}")
    
    if not path:
        raise InvalidQueryError("Path cannot be empty")
    
    return path


def validate_where(where: Any) -> Any:
    """
    Validate the shape of a where clause.
    
    Only the outer shape is checked; conditions themselves are never
    rejected (unknown operators simply match).
    
    Raises:
        InvalidQueryError: If where is not None, a mapping or a list of mappings
    """
    if where is None or isinstance(where, Mapping):
        return where
    
    if isinstance(where, (list, tuple)):
        for i, item in enumerate(where):
            if not isinstance(item, Mapping):
                raise InvalidQueryError(
                    f"where[{i}] must be a mapping, got {type(item).__name__}"
                )
        return where
    
    raise InvalidQueryError(
        f"where must be a mapping or a list of mappings, got {type(where).__name__}"
    )


def validate_order_by(order_by: Optional[Mapping]) -> Dict[str, str]:
    """
    Validate and normalize an orderBy mapping.
    
    Args:
        order_by: Mapping of path -> direction (case-insensitive)
        
    Returns:
        New dict with lower-case directions, preserving key order
        
    Raises:
        InvalidQueryError: If the mapping or a direction is invalid
    """
    if order_by is None:
        return {}
    
    if not isinstance(order_by, Mapping):
        raise InvalidQueryError(
            f"orderBy must be a mapping, got {type(order_by).__name__}"
        )
    
    validated = {}
    for path, direction in order_by.items():
        validate_path(path)
        value = getattr(direction, "value", direction)
        if not isinstance(value, str) or value.lower() not in VALID_DIRECTIONS:
            raise InvalidQueryError(
                f"Invalid sort direction for '{path}': {direction!r} "
                f"(expected one of {', '.join(VALID_DIRECTIONS)})"
            )
        validated[path] = value.lower()
    
    return validated


def validate_query_dict(query: Mapping) -> Mapping:
    """
    Reject unknown top-level query keys.
    
    Raises:
        InvalidQueryError: If query has keys other than where/orderBy
    """
    unknown = set(query) - QUERY_KEYS
    if unknown:
        raise InvalidQueryError(f"Unknown query keys: {sorted(map(str, unknown))}")
    
    if "orderBy" in query and "order_by" in query:
        raise InvalidQueryError("Use either 'orderBy' or 'order_by', not both")
    
    return query
