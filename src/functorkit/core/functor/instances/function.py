from __future__ import annotations

"""
Functor Instance for Callables.

For a function `g: X -> A`, mapping `f: A -> B` yields `X -> B`, i.e.
post-composition: the result calls `g` first and feeds its output to `f`.
"""

import functools
from typing import Any, Callable

from functorkit.core.functor.base import Functor


class FunctionFunctor(Functor):
    """Post-composition of callables."""

    name = "function"

    def map(self, fa: Callable[..., Any], f: Callable[[Any], Any]) -> Callable[..., Any]:
        """
        Return `h` with `h(*args, **kwargs) == f(fa(*args, **kwargs))`.

        Args:
            fa: Source callable. Any arity.
            f: Unary function applied to the source's result.

        Returns:
            Callable: The post-composed function.
        """
        if not callable(fa):
            raise TypeError(f"FunctionFunctor expects a callable, received {type(fa).__name__}.")

        @functools.wraps(fa)
        def mapped(*args: Any, **kwargs: Any) -> Any:
            return f(fa(*args, **kwargs))

        return mapped
