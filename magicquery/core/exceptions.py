"""
Custom exceptions for magicquery.
"""


class MagicQueryError(Exception):
    """Base exception for magicquery."""
    pass


class ValidationError(MagicQueryError):
    """Input validation error."""
    pass


class QueryError(MagicQueryError):
    """Error related to query evaluation."""
    pass


class InvalidQueryError(QueryError, ValidationError):
    """Query has an unusable shape (bad where, orderBy or group path)."""
    pass


class InvalidPatternError(QueryError):
    """A $regex pattern could not be compiled."""
    
    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern {pattern!r}: {reason}")
