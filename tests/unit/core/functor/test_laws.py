from __future__ import annotations

"""
Unit tests for Functor Law Verification.

Uses a deliberately broken instance to make sure violations are detected
and reported.
"""

import sys

import pytest

from functorkit.core.functor.base import Functor
from functorkit.core.functor.instances import FunctionFunctor, ListFunctor, TreeFunctor
from functorkit.core.functor.laws import (
    check_composition,
    check_identity,
    probe_eq,
    verify_laws,
)
from functorkit.core.tree import traversal
from functorkit.core.tree.generator import balanced_tree, left_spine
from functorkit.domain.errors import LawViolation


class ReversingListFunctor(Functor):
    """Breaks the identity law by reversing the list."""

    name = "reversing"

    def map(self, fa, f):
        return [f(a) for a in reversed(fa)]


FUNCTIONS = [("double", lambda x: x * 2), ("inc", lambda x: x + 1)]


def test_identity_holds_for_list():
    result = check_identity(ListFunctor(), [1, 2, 3])
    assert result.holds
    assert result.law == "identity"


def test_identity_violation_detected():
    result = check_identity(ReversingListFunctor(), [1, 2, 3])
    assert not result.holds
    assert "[1, 2, 3]" in result.detail


def test_identity_on_deep_tree_with_default_equality():
    deep = left_spine(sys.getrecursionlimit() * 3)
    assert check_identity(TreeFunctor(), deep).holds
    assert check_composition(TreeFunctor(), deep, lambda x: x + 1, lambda x: x * 3).holds


def test_composition_holds_for_tree(sample_tree):
    result = check_composition(TreeFunctor(), sample_tree, lambda x: x + 1, lambda x: x * 3)
    assert result.holds


def test_verify_laws_report_counts():
    samples = [balanced_tree([1, 2, 3]), balanced_tree([4])]

    report = verify_laws(TreeFunctor(), samples, FUNCTIONS, eq=traversal.equal)

    # per sample: 1 identity + 2*2 composition checks
    assert report.checked == 10
    assert report.ok
    assert report.failures == []
    report.raise_for_failures()


def test_verify_laws_raises_on_failure():
    report = verify_laws(ReversingListFunctor(), [[1, 2]], FUNCTIONS)

    assert not report.ok
    assert report.as_dict()["instance"] == "reversing"
    with pytest.raises(LawViolation, match="identity"):
        report.raise_for_failures()


def test_probe_eq_for_function_functor():
    eq = probe_eq(range(-3, 4))
    report = verify_laws(FunctionFunctor(), [lambda x: x - 1, abs], FUNCTIONS, eq=eq)
    assert report.ok
    assert eq(lambda x: x, lambda x: x)
    assert not eq(lambda x: x, lambda x: -x)
