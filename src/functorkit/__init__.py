from __future__ import annotations

from functorkit.core.functor.base import Functor, compose2, identity
from functorkit.core.functor.composed import ComposedFunctor
from functorkit.core.functor.instances import (
    FunctionFunctor,
    ListFunctor,
    MappingFunctor,
    OptionFunctor,
    TreeFunctor,
    TupleFunctor,
)
from functorkit.core.functor.laws import (
    LawReport,
    LawResult,
    check_composition,
    check_identity,
    verify_laws,
)
from functorkit.core.functor.registry import FunctorRegistry, default_registry, fmap
from functorkit.domain.errors import (
    FunctorError,
    InstanceNotFoundError,
    LawViolation,
    TreeDecodeError,
    UnknownFunctionError,
)
from functorkit.domain.option_models import NOTHING, Nothing, Option, Some, option
from functorkit.domain.tree_models import Branch, Leaf, Tree, branch, leaf

__version__ = "1.0.0"

__all__ = [
    "Functor",
    "ComposedFunctor",
    "TreeFunctor",
    "ListFunctor",
    "TupleFunctor",
    "OptionFunctor",
    "MappingFunctor",
    "FunctionFunctor",
    "FunctorRegistry",
    "default_registry",
    "fmap",
    "identity",
    "compose2",
    "LawReport",
    "LawResult",
    "check_identity",
    "check_composition",
    "verify_laws",
    "Tree",
    "Leaf",
    "Branch",
    "leaf",
    "branch",
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "option",
    "FunctorError",
    "InstanceNotFoundError",
    "TreeDecodeError",
    "UnknownFunctionError",
    "LawViolation",
]
