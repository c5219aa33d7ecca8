from __future__ import annotations

"""
Functor Composition.

Two functors F and G compose into a functor for F[G[A]]: mapping reaches
through the outer layer and then through each inner container.
"""

from typing import Any, Callable

from functorkit.core.functor.base import Functor


class ComposedFunctor(Functor):
    """
    Functor for nested containers, e.g. a list of Options or a Tree of lists.

    Attributes:
        outer: Functor of the enclosing container.
        inner: Functor of each nested container.
    """

    def __init__(self, outer: Functor, inner: Functor) -> None:
        self.outer = outer
        self.inner = inner
        self.name = f"{outer.name}[{inner.name}]"

    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        inner = self.inner
        return self.outer.map(fa, lambda ga: inner.map(ga, f))

    def __repr__(self) -> str:
        return f"ComposedFunctor({self.outer!r}, {self.inner!r})"
