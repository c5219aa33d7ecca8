from __future__ import annotations

"""
Unit tests for the sequence, option, mapping and function instances.
"""

from collections import OrderedDict

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from functorkit.core.functor.base import compose2, identity
from functorkit.core.functor.instances import (
    FunctionFunctor,
    ListFunctor,
    MappingFunctor,
    OptionFunctor,
    TupleFunctor,
)
from functorkit.domain.option_models import NOTHING, Some


def inc(x):
    return x + 1


def double(x):
    return x * 2


# -----------------------------------------------------------------------------
# Sequences
# -----------------------------------------------------------------------------

def test_list_map_preserves_order_and_source():
    xs = [1, 2, 3]
    assert ListFunctor().map(xs, double) == [2, 4, 6]
    assert xs == [1, 2, 3]


def test_list_map_empty():
    assert ListFunctor().map([], double) == []


def test_tuple_map_returns_tuple():
    result = TupleFunctor().map((1, 2), inc)
    assert result == (2, 3)
    assert isinstance(result, tuple)


def test_sequence_instances_reject_wrong_types():
    with pytest.raises(TypeError):
        ListFunctor().map((1, 2), inc)
    with pytest.raises(TypeError):
        TupleFunctor().map([1, 2], inc)


@given(st.lists(st.integers()))
@settings(max_examples=50, deadline=None)
def test_list_laws(xs):
    F = ListFunctor()
    assert F.map(xs, identity) == xs
    assert F.map(F.map(xs, inc), double) == F.map(xs, compose2(inc, double))

# -----------------------------------------------------------------------------
# Option
# -----------------------------------------------------------------------------

def test_option_map_some():
    assert OptionFunctor().map(Some(4), double) == Some(8)


def test_option_map_nothing_skips_function():
    def never(_):
        raise AssertionError("must not be called")

    assert OptionFunctor().map(NOTHING, never) is NOTHING


def test_option_rejects_plain_none():
    with pytest.raises(TypeError):
        OptionFunctor().map(None, inc)

# -----------------------------------------------------------------------------
# Mapping
# -----------------------------------------------------------------------------

def test_mapping_map_keeps_keys_and_order():
    source = OrderedDict([("b", 1), ("a", 2)])
    result = MappingFunctor().map(source, double)
    assert list(result.items()) == [("b", 2), ("a", 4)]
    assert source == OrderedDict([("b", 1), ("a", 2)])


def test_mapping_rejects_lists():
    with pytest.raises(TypeError):
        MappingFunctor().map([("a", 1)], inc)

# -----------------------------------------------------------------------------
# Function
# -----------------------------------------------------------------------------

def test_function_map_is_post_composition():
    h = FunctionFunctor().map(len, double)
    assert h("abc") == 6


def test_function_map_forwards_all_arguments():
    def area(w, h=1):
        return w * h

    mapped = FunctionFunctor().map(area, str)
    assert mapped(3, h=4) == "12"
    assert mapped.__name__ == "area"


def test_function_map_rejects_non_callables():
    with pytest.raises(TypeError):
        FunctionFunctor().map(42, inc)


@given(st.integers(min_value=-50, max_value=50))
def test_function_laws(x):
    F = FunctionFunctor()
    g = double
    assert F.map(g, identity)(x) == g(x)
    assert F.map(F.map(g, inc), double)(x) == F.map(g, compose2(inc, double))(x)
