"""
Load results.

`Engine.load` and `parse_document` hand back either `Ok(value)` or
`Err(error)` instead of raising, so a malformed document is an ordinary
outcome for callers. The error side always carries a JsonLensError, which
knows how to describe itself for the CLI's JSON envelope.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import JsonLensError

T = TypeVar("T")
E = TypeVar("E", bound=JsonLensError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful parse or load."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed parse or load."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error itself, so callers catch the domain type."""
        raise self.error


Result = Union[Ok[T], Err[E]]
