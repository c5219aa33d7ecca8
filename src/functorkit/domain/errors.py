from __future__ import annotations

"""
Domain Exceptions.

Error types raised by the library and surfaced by the CLI. Each one also
derives from the closest builtin so callers can catch the generic form.
"""


class FunctorError(Exception):
    """Base class for all functorkit errors."""


class InstanceNotFoundError(FunctorError, LookupError):
    """No functor instance is registered for the requested type."""

    def __init__(self, type_name: str):
        super().__init__(f"No Functor instance registered for type '{type_name}'.")
        self.type_name = type_name


class TreeDecodeError(FunctorError, ValueError):
    """Compact tree data could not be decoded."""


class UnknownFunctionError(FunctorError, KeyError):
    """A named mapping function is not present in the catalog."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown function '{self.name}'."


class LawViolation(FunctorError, AssertionError):
    """A functor law did not hold for at least one sample."""
