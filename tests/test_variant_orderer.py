"""Tests for :mod:`catalogview.domain.services.ordering`."""

from __future__ import annotations

import itertools

import pytest

from catalogview.domain.models import Variant
from catalogview.domain.services import VariantOrderer
from catalogview.errors import DomainError, ReorderIndexError


@pytest.fixture
def orderer() -> VariantOrderer:
    return VariantOrderer()


@pytest.fixture
def siblings() -> list[Variant]:
    return [Variant(id=variant_id, index=i) for i, variant_id in enumerate("ABCD")]


def _ids(variants):
    return [variant.id for variant in variants]


def test_move_forward_removes_then_inserts(orderer, siblings):
    assert _ids(orderer.reorder(siblings, 0, 2)) == ["B", "C", "A", "D"]


def test_move_backward(orderer, siblings):
    assert _ids(orderer.reorder(siblings, 3, 1)) == ["A", "D", "B", "C"]


def test_same_index_is_identity(orderer, siblings):
    result = orderer.reorder(siblings, 2, 2)
    assert all(a is b for a, b in zip(result, siblings))


def test_input_is_not_mutated(orderer, siblings):
    original = list(siblings)
    orderer.reorder(siblings, 0, 3)
    assert siblings == original


def test_every_valid_move_is_a_permutation(orderer, siblings):
    for from_index, to_index in itertools.product(range(4), repeat=2):
        result = orderer.reorder(siblings, from_index, to_index)
        assert len(result) == len(siblings)
        assert sorted(_ids(result)) == ["A", "B", "C", "D"]
        assert result[to_index] is siblings[from_index]


@pytest.mark.parametrize("from_index, to_index", [(4, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_indices_raise(orderer, siblings, from_index, to_index):
    with pytest.raises(ReorderIndexError):
        orderer.reorder(siblings, from_index, to_index)


def test_empty_list_has_no_valid_index(orderer):
    with pytest.raises(ReorderIndexError):
        orderer.reorder([], 0, 0)


def test_reorder_error_is_domain_and_index_error():
    assert issubclass(ReorderIndexError, DomainError)
    assert issubclass(ReorderIndexError, IndexError)


def test_ordered_ids(orderer, siblings):
    assert orderer.ordered_ids(siblings) == ["A", "B", "C", "D"]
