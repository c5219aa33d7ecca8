from __future__ import annotations

"""
Functor Law Verification.

Checks the two laws every instance must satisfy:

- Identity:     map(fa, id) == fa
- Composition:  map(map(fa, f), g) == map(fa, g . f)

Results are returned as data so that callers (tests, the CLI) decide how
to report them. `LawReport.raise_for_failures` turns failures into an
exception.
"""

import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Sequence, Tuple

from functorkit.core.functor.base import Functor, compose2, identity
from functorkit.domain.errors import LawViolation

logger = logging.getLogger(__name__)

Equality = Callable[[Any, Any], bool]
NamedFunction = Tuple[str, Callable[[Any], Any]]

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LawResult:
    """
    Outcome of a single law check.

    Attributes:
        law: "identity" or "composition".
        holds: Whether both sides compared equal.
        detail: Human readable description of the sample and functions used.
    """
    law: str
    holds: bool
    detail: str = ""


@dataclass
class LawReport:
    """Aggregated outcome of `verify_laws`."""
    instance: str
    results: List[LawResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.holds for r in self.results)

    @property
    def failures(self) -> List[LawResult]:
        return [r for r in self.results if not r.holds]

    @property
    def checked(self) -> int:
        return len(self.results)

    def raise_for_failures(self) -> None:
        """
        Raise if any check failed.

        Raises:
            LawViolation: Lists every failing check.
        """
        failures = self.failures
        if failures:
            lines = [f"{r.law}: {r.detail}" for r in failures]
            raise LawViolation(
                f"{len(failures)} law check(s) failed for {self.instance}:\n" + "\n".join(lines)
            )

    def as_dict(self) -> dict:
        return {
            "instance": self.instance,
            "ok": self.ok,
            "checked": self.checked,
            "failures": [{"law": r.law, "detail": r.detail} for r in self.failures],
        }

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def check_identity(instance: Functor, fa: Any, *, eq: Equality = operator.eq) -> LawResult:
    """
    Verify `map(fa, identity) == fa`.

    Args:
        instance: Functor under test.
        fa: Sample container.
        eq: Equality used to compare both sides.

    Returns:
        LawResult: The check outcome.
    """
    mapped = instance.map(fa, identity)
    holds = bool(eq(mapped, fa))
    return LawResult("identity", holds, "" if holds else f"sample={fa!r}")


def check_composition(
        instance: Functor,
        fa: Any,
        f: Callable[[Any], Any],
        g: Callable[[Any], Any],
        *,
        eq: Equality = operator.eq,
) -> LawResult:
    """
    Verify `map(map(fa, f), g) == map(fa, g . f)`.

    Args:
        instance: Functor under test.
        fa: Sample container.
        f: Applied first.
        g: Applied second.
        eq: Equality used to compare both sides.

    Returns:
        LawResult: The check outcome.
    """
    stepwise = instance.map(instance.map(fa, f), g)
    fused = instance.map(fa, compose2(f, g))
    holds = bool(eq(stepwise, fused))
    detail = ""
    if not holds:
        detail = (
            f"sample={fa!r} f={getattr(f, '__name__', f)!s} "
            f"g={getattr(g, '__name__', g)!s}"
        )
    return LawResult("composition", holds, detail)


def verify_laws(
        instance: Functor,
        samples: Iterable[Any],
        functions: Sequence[NamedFunction],
        *,
        eq: Equality = operator.eq,
) -> LawReport:
    """
    Run identity on every sample and composition on every ordered pair of
    functions for every sample.

    Args:
        instance: Functor under test.
        samples: Containers to check.
        functions: (name, function) pairs used for composition.
        eq: Equality used to compare both sides.

    Returns:
        LawReport: All individual results.
    """
    report = LawReport(instance=instance.name)

    for sample in samples:
        report.results.append(check_identity(instance, sample, eq=eq))
        for f_name, f in functions:
            for g_name, g in functions:
                result = check_composition(instance, sample, f, g, eq=eq)
                if not result.holds:
                    result = LawResult(result.law, False, f"{result.detail} ({f_name} then {g_name})")
                report.results.append(result)

    logger.debug(
        f"Laws: {report.checked} checks for {report.instance}, "
        f"{len(report.failures)} failure(s)."
    )
    return report


def probe_eq(probes: Sequence[Any]) -> Equality:
    """
    Build an extensional equality for callables.

    Two functions are considered equal when they return equal results for
    every probe argument.

    Args:
        probes: Arguments each function is called with.

    Returns:
        Equality: Comparison usable with the function functor.
    """
    def eq(a: Callable[[Any], Any], b: Callable[[Any], Any]) -> bool:
        return all(a(p) == b(p) for p in probes)

    return eq
