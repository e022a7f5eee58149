"""
Error taxonomy for the projection engine.

Neither error is fatal: a ParseError terminates one load and is returned
as a value, a ShapeError only disqualifies one projection.
"""

from typing import Optional


class JsonLensError(Exception):
    """Base class for engine errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"type": type(self).__name__, "message": self.message}


class ParseError(JsonLensError):
    """Input text is not well-formed JSON."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def to_dict(self) -> dict:
        return {**super().to_dict(), "line": self.line, "column": self.column}


class ShapeError(JsonLensError):
    """Value is structurally ineligible for a specific projection."""
