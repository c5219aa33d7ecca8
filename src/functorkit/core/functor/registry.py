from __future__ import annotations

"""
Functor Instance Registry.

Keeps an explicit table from Python types to functor instances. Nothing is
resolved implicitly: callers either pass an instance straight to `fmap` or
ask a registry object (the default one, or their own) to pick it by type.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from functorkit.core.functor.base import Functor
from functorkit.core.functor.instances import (
    FunctionFunctor,
    ListFunctor,
    MappingFunctor,
    OptionFunctor,
    TreeFunctor,
    TupleFunctor,
)
from functorkit.domain.errors import InstanceNotFoundError
from functorkit.domain.option_models import Option
from functorkit.domain.tree_models import Tree

logger = logging.getLogger(__name__)


class FunctorRegistry:
    """
    Thread-safe lookup table of functor instances keyed by type.

    Resolution order for a value:
    1. Exact entries along the MRO of its type.
    2. Registered abstract base classes (e.g. `collections.abc.Mapping`),
       in registration order.
    3. The callable fallback, for callable values (classes included).

    `resolve_type` applies steps 1 and 2 to a type itself.
    """

    def __init__(self) -> None:
        self._instances: Dict[type, Functor] = {}
        self._callable_instance: Optional[Functor] = None
        self._lock = threading.Lock()

    def register(self, tp: Type[Any], instance: Functor) -> None:
        """
        Bind `instance` to `tp`, replacing any previous binding.

        Args:
            tp: The container type the instance maps over.
            instance: Functor implementation for that type.

        Raises:
            TypeError: If `tp` is not a type or `instance` is not a Functor.
        """
        if not isinstance(tp, type):
            raise TypeError(f"Expected a type, received {type(tp).__name__}.")
        if not isinstance(instance, Functor):
            raise TypeError(f"Expected a Functor instance, received {type(instance).__name__}.")

        with self._lock:
            if tp in self._instances:
                logger.debug(f"Registry: Replacing instance for {tp.__name__}.")
            self._instances[tp] = instance
        logger.debug(f"Registry: Registered {type(instance).__name__} for {tp.__name__}.")

    def register_callable(self, instance: Functor) -> None:
        """Set the instance used for plain callables (functions, lambdas, partials)."""
        with self._lock:
            self._callable_instance = instance

    def resolve(self, value: Any) -> Functor:
        """
        Find the functor instance for a value.

        Classes are values too: `int` or `str` passed here are callables and
        resolve to the function instance. Use `resolve_type` to look up the
        instance for a container type.

        Args:
            value: A container or callable.

        Returns:
            Functor: The matching instance.

        Raises:
            InstanceNotFoundError: If no entry matches.
        """
        tp = type(value)
        with self._lock:
            instance = self._lookup(tp)
            if instance is None and self._callable_instance is not None and callable(value):
                instance = self._callable_instance
        if instance is None:
            raise InstanceNotFoundError(tp.__name__)
        return instance

    def resolve_type(self, tp: Type[Any]) -> Functor:
        """
        Find the functor instance registered for a container type.

        Args:
            tp: The container type, e.g. `list` or `Leaf`.

        Returns:
            Functor: The matching instance.

        Raises:
            TypeError: If `tp` is not a type.
            InstanceNotFoundError: If no entry matches.
        """
        if not isinstance(tp, type):
            raise TypeError(f"Expected a type, received {type(tp).__name__}.")
        with self._lock:
            instance = self._lookup(tp)
        if instance is None:
            raise InstanceNotFoundError(tp.__name__)
        return instance

    def instances(self) -> List[Tuple[type, Functor]]:
        """Snapshot of the registered (type, instance) pairs."""
        with self._lock:
            return list(self._instances.items())

    def __contains__(self, value: Any) -> bool:
        try:
            self.resolve(value)
        except InstanceNotFoundError:
            return False
        return True

    def _lookup(self, tp: type) -> Optional[Functor]:
        # Caller holds the lock
        for klass in tp.__mro__:
            if klass in self._instances:
                return self._instances[klass]
        for registered, instance in self._instances.items():
            if issubclass(tp, registered):
                return instance
        return None


def build_default_registry() -> FunctorRegistry:
    """
    Create a registry pre-populated with the builtin instances.

    Returns:
        FunctorRegistry: Tree, list, tuple, Option, Mapping and callables.
    """
    registry = FunctorRegistry()
    registry.register(Tree, TreeFunctor())
    registry.register(list, ListFunctor())
    registry.register(tuple, TupleFunctor())
    registry.register(Option, OptionFunctor())
    registry.register(Mapping, MappingFunctor())
    registry.register_callable(FunctionFunctor())
    return registry


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

# Process-wide registry used when callers do not supply their own
_DEFAULT_REGISTRY = build_default_registry()


def default_registry() -> FunctorRegistry:
    """Return the process-wide registry."""
    return _DEFAULT_REGISTRY


def fmap(
        fa: Any,
        f: Callable[[Any], Any],
        *,
        instance: Optional[Functor] = None,
        registry: Optional[FunctorRegistry] = None,
) -> Any:
    """
    Map `f` over `fa`.

    `fa` is always treated as a value: a class such as `int` is a callable
    and is post-composed with `f`.

    Args:
        fa: Container to transform.
        f: Function applied to each contained value.
        instance: Explicit functor instance; skips registry lookup.
        registry: Registry to resolve from when no instance is given.

    Returns:
        Any: New container of the same shape.
    """
    if instance is None:
        instance = (registry or _DEFAULT_REGISTRY).resolve(fa)
    return instance.map(fa, f)
