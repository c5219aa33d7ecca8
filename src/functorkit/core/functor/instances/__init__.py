from __future__ import annotations

from .function import FunctionFunctor
from .mapping import MappingFunctor
from .option import OptionFunctor
from .sequence import ListFunctor, TupleFunctor
from .tree import TreeFunctor

__all__ = [
    "TreeFunctor",
    "ListFunctor",
    "TupleFunctor",
    "OptionFunctor",
    "MappingFunctor",
    "FunctionFunctor",
]
