from __future__ import annotations

"""
Functor Instance for Mappings.

Maps over the values of a dictionary; keys and their insertion order are
left untouched.
"""

from typing import Any, Callable, Dict, Mapping

from functorkit.core.functor.base import Functor


class MappingFunctor(Functor):
    """Value-wise map over `dict` (and any other Mapping)."""

    name = "dict"

    def map(self, fa: Mapping[Any, Any], f: Callable[[Any], Any]) -> Dict[Any, Any]:
        """
        Build a new dict with `f` applied to every value.

        Args:
            fa: Source mapping.
            f: Function applied to each value.

        Returns:
            Dict[Any, Any]: Same keys, transformed values.
        """
        if not isinstance(fa, Mapping):
            raise TypeError(f"MappingFunctor expects a Mapping, received {type(fa).__name__}.")
        return {k: f(v) for k, v in fa.items()}
