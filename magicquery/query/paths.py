"""
Dot-path resolution over records.

``resolve("user.profile.age")`` compiles an accessor closure once per
distinct path and keeps it in the process-wide path cache. Sequences are
leaves: a segment never indexes into a list.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from ..utils.guards import MISSING
from .cache import path_cache


Accessor = Callable[[Any], Any]


def _step(current: Any, key: str) -> Any:
    """Descend one level, or return MISSING if not traversable."""
    if isinstance(current, Mapping):
        return current.get(key, MISSING)
    return MISSING


def compile_accessor(path: str) -> Accessor:
    """
    Build an accessor function for a dot-separated path.
    
    Two- and three-segment paths get unrolled closures; longer paths
    walk a loop.
    
    Args:
        path: Dot-separated path (e.g. "user.profile.age")
        
    Returns:
        Callable mapping a record to the value at path, or MISSING
    """
    parts = path.split(".")
    
    if len(parts) == 1:
        key = parts[0]
        
        def accessor(record: Any) -> Any:
            return _step(record, key)
    
    elif len(parts) == 2:
        p0, p1 = parts
        
        def accessor(record: Any) -> Any:
            return _step(_step(record, p0), p1)
    
    elif len(parts) == 3:
        p0, p1, p2 = parts
        
        def accessor(record: Any) -> Any:
            return _step(_step(_step(record, p0), p1), p2)
    
    else:
        def accessor(record: Any) -> Any:
            current = record
            for part in parts:
                current = _step(current, part)
                if current is MISSING:
                    break
            return current
    
    return accessor


def get_accessor(path: str) -> Accessor:
    """Return the cached accessor for path, compiling it on first use."""
    return path_cache.get_or_create(path, lambda: compile_accessor(path))


def resolve(record: Any, path: str) -> Any:
    """
    Get the value at path, or MISSING.
    
    Never raises for missing intermediates, ``None`` intermediates or
    intermediates that are not mappings.
    """
    if not path or not isinstance(record, Mapping):
        return MISSING
    if "." not in path:
        return record.get(path, MISSING)
    return get_accessor(path)(record)


def exists(record: Any, path: str) -> bool:
    """
    Check whether path is structurally present in record.
    
    Unlike ``resolve``, a key holding ``None`` exists, while a path that
    runs through a ``None`` or non-mapping intermediate does not.
    """
    if not path or not isinstance(record, Mapping):
        return False
    
    parts = path.split(".")
    current: Any = record
    for part in parts[:-1]:
        if not isinstance(current, Mapping) or part not in current:
            return False
        current = current[part]
    
    return isinstance(current, Mapping) and parts[-1] in current
