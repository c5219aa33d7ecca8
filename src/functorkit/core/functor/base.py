from __future__ import annotations

"""
Base Definitions for Functor Instances.

Provides the abstract interface every functor instance implements, plus
the operations derived from `map` alone. Instances are plain objects
passed explicitly to call sites; they carry no state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from functorkit.core.functor.composed import ComposedFunctor


class Functor(ABC):
    """
    Abstract base class for type-constructor specific `map` algorithms.

    Subclasses implement `map` and must satisfy the identity and
    composition laws (see `functorkit.core.functor.laws`).
    """

    # Human readable name of the mapped type constructor
    name: str = "F"

    @abstractmethod
    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        """
        Apply `f` to every value held by `fa`, preserving its structure.

        Args:
            fa: Container whose values are transformed.
            f: Total function applied to each contained value.

        Returns:
            Any: A new container of the same shape.
        """
        pass

    # -------------------------------------------------------------------------
    # DERIVED OPERATIONS
    # -------------------------------------------------------------------------

    def lift(self, f: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """
        Turn `A -> B` into `F[A] -> F[B]`.

        Args:
            f: Function on plain values.

        Returns:
            Callable: Function on containers.
        """
        def lifted(fa: Any) -> Any:
            return self.map(fa, f)

        lifted.__name__ = f"lift_{getattr(f, '__name__', 'f')}"
        return lifted

    def fproduct(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        """Pair every value with its image: `a -> (a, f(a))`."""
        return self.map(fa, lambda a: (a, f(a)))

    def as_(self, fa: Any, value: Any) -> Any:
        """Replace every value with `value`."""
        return self.map(fa, lambda _: value)

    def void(self, fa: Any) -> Any:
        """Discard every value, keeping only the structure."""
        return self.as_(fa, None)

    def tuple_left(self, fa: Any, value: Any) -> Any:
        """Tuple `value` on the left of every element: `a -> (value, a)`."""
        return self.map(fa, lambda a: (value, a))

    def tuple_right(self, fa: Any, value: Any) -> Any:
        """Tuple `value` on the right of every element: `a -> (a, value)`."""
        return self.map(fa, lambda a: (a, value))

    def compose(self, inner: "Functor") -> "ComposedFunctor":
        """
        Build the functor for `F[G[A]]` where F is self and G is `inner`.

        Args:
            inner: Functor of the nested container.

        Returns:
            ComposedFunctor: Instance mapping through both layers.
        """
        from functorkit.core.functor.composed import ComposedFunctor

        return ComposedFunctor(self, inner)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def identity(a: Any) -> Any:
    """Return the argument unchanged."""
    return a


def compose2(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Compose two unary functions, applying `f` first and then `g`.

    Args:
        f: First function.
        g: Second function.

    Returns:
        Callable: `x -> g(f(x))`.
    """
    def composed(x: Any) -> Any:
        return g(f(x))

    return composed

