from __future__ import annotations

"""
Named Function Catalog.

Total functions addressable by name from the command line. Keeping the
set closed avoids evaluating user supplied code.
"""

from typing import Any, Callable, Dict, List, Sequence

from functorkit.core.functor.base import compose2, identity
from functorkit.domain.errors import UnknownFunctionError


def double(x: Any) -> Any:
    return x * 2


def increment(x: Any) -> Any:
    return x + 1


def decrement(x: Any) -> Any:
    return x - 1


def negate(x: Any) -> Any:
    return -x


def square(x: Any) -> Any:
    return x * x


def halve(x: Any) -> Any:
    return x / 2


def to_str(x: Any) -> str:
    return str(x)


FUNCTIONS: Dict[str, Callable[[Any], Any]] = {
    "identity": identity,
    "double": double,
    "increment": increment,
    "decrement": decrement,
    "negate": negate,
    "square": square,
    "halve": halve,
    "to_str": to_str,
}

# Functions closed over integers, used for law checks on random int trees
NUMERIC_FUNCTIONS: List[str] = ["identity", "double", "increment", "decrement", "negate", "square"]


def available_functions() -> List[str]:
    """Sorted list of catalog names."""
    return sorted(FUNCTIONS)


def resolve_function(name: str) -> Callable[[Any], Any]:
    """
    Look up a function by name.

    Args:
        name: Catalog key, case-insensitive; surrounding whitespace ignored.

    Returns:
        Callable: The named function.

    Raises:
        UnknownFunctionError: If the name is not in the catalog.
    """
    key = (name or "").strip().lower()
    try:
        return FUNCTIONS[key]
    except KeyError:
        raise UnknownFunctionError(name) from None


def chain(names: Sequence[str]) -> Callable[[Any], Any]:
    """
    Compose catalog functions left to right (the first name runs first).

    An empty sequence yields `identity`.
    """
    fn: Callable[[Any], Any] = identity
    for name in names:
        fn = compose2(fn, resolve_function(name))
    return fn
