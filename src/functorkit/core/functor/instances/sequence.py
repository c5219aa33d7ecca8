from __future__ import annotations

"""
Functor Instances for Builtin Sequences.
"""

from typing import Any, Callable, List, Tuple

from functorkit.core.functor.base import Functor


class ListFunctor(Functor):
    """Element-wise map over lists. Order and length are preserved."""

    name = "list"

    def map(self, fa: List[Any], f: Callable[[Any], Any]) -> List[Any]:
        """Return a new list with `f` applied to every element."""
        if not isinstance(fa, list):
            raise TypeError(f"ListFunctor expects a list, received {type(fa).__name__}.")
        return [f(a) for a in fa]


class TupleFunctor(Functor):
    """Element-wise map over tuples."""

    name = "tuple"

    def map(self, fa: Tuple[Any, ...], f: Callable[[Any], Any]) -> Tuple[Any, ...]:
        if not isinstance(fa, tuple):
            raise TypeError(f"TupleFunctor expects a tuple, received {type(fa).__name__}.")
        return tuple(f(a) for a in fa)
