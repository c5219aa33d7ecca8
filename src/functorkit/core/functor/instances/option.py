from __future__ import annotations

"""
Functor Instance for Optional Values.
"""

from typing import Any, Callable

from functorkit.core.functor.base import Functor
from functorkit.domain.option_models import NOTHING, Nothing, Option, Some


class OptionFunctor(Functor):
    """
    Map over Some/NOTHING.

    The function is only invoked for `Some`; NOTHING maps to itself.
    """

    name = "Option"

    def map(self, fa: Option[Any], f: Callable[[Any], Any]) -> Option[Any]:
        if isinstance(fa, Some):
            return Some(f(fa.value))
        if isinstance(fa, Nothing):
            return NOTHING
        raise TypeError(f"OptionFunctor expects an Option, received {type(fa).__name__}.")
