from __future__ import annotations

"""
Optional Value Data Models.

Explicit presence/absence container. `Some` wraps a value (which may itself
be None), `NOTHING` is the single empty instance.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

A = TypeVar("A")


class Option(Generic[A]):
    """Abstract root of the {Some, Nothing} variant set."""

    __slots__ = ()

    @property
    def is_empty(self) -> bool:
        return isinstance(self, Nothing)

    def get_or_else(self, default: Any) -> Any:
        """
        Return the wrapped value, or `default` when empty.

        Args:
            default: Fallback returned for NOTHING.

        Returns:
            Any: The contained value or the fallback.
        """
        if isinstance(self, Some):
            return self.value
        return default


@dataclass(frozen=True)
class Some(Option[A]):
    """Present value."""
    value: A

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class Nothing(Option[Any]):
    """Absent value. Use the `NOTHING` singleton."""

    _instance: Optional["Nothing"] = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()


def option(value: Optional[A]) -> Option[A]:
    """
    Lift a nullable Python value into an Option.

    Args:
        value: Any value; None maps to NOTHING.

    Returns:
        Option: Some(value) or NOTHING.
    """
    if value is None:
        return NOTHING
    return Some(value)
