"""
Engine Error Types

All three conditions are local and recoverable. Aggregations skip or
zero-default the offending record and report it as a RecordIssue instead
of letting the exception escape.

InvalidAmount and InvalidDate subclass ValueError so that pydantic field
validators turn them into ordinary validation errors.
"""

from typing import Optional


class EngineError(Exception):
    """Base exception for aggregation engine errors."""
    pass


class InvalidAmount(EngineError, ValueError):
    """Amount text is not a well-formed non-negative decimal."""
    
    def __init__(self, value: object, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Invalid amount: {value!r:.80}")


class InvalidDate(EngineError, ValueError):
    """Date or period string is not in ISO YYYY-MM-DD / YYYY-MM form."""
    
    def __init__(self, value: object, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Invalid date: {value!r:.80}")


class MissingCategory(EngineError):
    """A record references a category absent from the category list."""
    
    def __init__(self, category: str, message: Optional[str] = None):
        self.category = category
        super().__init__(message or f"Unknown category: {category!r:.80}")
