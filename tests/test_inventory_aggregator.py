"""Tests for :mod:`catalogview.domain.services.inventory`."""

from __future__ import annotations

import pytest

from catalogview.domain.models import Variant
from catalogview.domain.services import InventoryAggregator


@pytest.fixture
def aggregator() -> InventoryAggregator:
    return InventoryAggregator()


def test_empty_input_returns_empty_list(aggregator):
    assert aggregator.annotate([]) == []


def test_percentages_split_tracked_stock(aggregator):
    a = Variant(id="a", index=0, inventory_management=True, inventory_available_to_sell=30)
    b = Variant(id="b", index=1, inventory_management=True, inventory_available_to_sell=70)

    result = aggregator.annotate([a, b])

    assert [v.inventory_total for v in result] == [100, 100]
    assert a.inventory_percentage == 30
    assert b.inventory_percentage == 70


def test_equal_stock_gives_fifty_percent_each(aggregator):
    a = Variant(id="a", index=0, inventory_management=True, inventory_available_to_sell=1)
    b = Variant(id="b", index=1, inventory_management=True, inventory_available_to_sell=1)

    aggregator.annotate([a, b])

    assert a.inventory_total == 2
    assert (a.inventory_percentage, b.inventory_percentage) == (50, 50)


def test_percentage_truncates_instead_of_rounding(aggregator):
    a = Variant(id="a", index=0, inventory_management=True, inventory_available_to_sell=2)
    b = Variant(id="b", index=1, inventory_management=True, inventory_available_to_sell=1)

    aggregator.annotate([a, b])

    assert a.inventory_percentage == 66
    assert b.inventory_percentage == 33


def test_untracked_variants_report_full_stock(aggregator):
    variants = [
        Variant(id="a", index=0, inventory_available_to_sell=5),
        Variant(id="b", index=1, inventory_available_to_sell=0),
    ]

    result = aggregator.annotate(variants)

    assert all(v.inventory_percentage == 100 for v in result)
    assert all(v.inventory_total == 0 for v in result)


def test_zero_tracked_total_falls_back_to_full_stock(aggregator):
    variants = [
        Variant(id="a", index=0, inventory_management=True, inventory_available_to_sell=0),
        Variant(id="b", index=1, inventory_management=True, inventory_available_to_sell=0),
    ]

    result = aggregator.annotate(variants)

    assert [v.inventory_total for v in result] == [0, 0]
    assert [v.inventory_percentage for v in result] == [100, 100]


def test_untracked_sibling_is_excluded_from_total(aggregator):
    tracked = Variant(id="a", index=0, inventory_management=True, inventory_available_to_sell=4)
    untracked = Variant(id="b", index=1, inventory_management=False, inventory_available_to_sell=96)

    aggregator.annotate([tracked, untracked])

    assert tracked.inventory_total == 4
    assert tracked.inventory_percentage == 100
    assert untracked.inventory_percentage == 100


def test_missing_quantity_is_skipped(aggregator):
    known = Variant(id="a", index=0, inventory_management=True, inventory_available_to_sell=10)
    unknown = Variant(id="b", index=1, inventory_management=True, inventory_available_to_sell=None)

    aggregator.annotate([known, unknown])

    assert known.inventory_total == 10
    assert known.inventory_percentage == 100
    assert unknown.inventory_percentage == 0


def test_width_subtracts_title_length(aggregator):
    short = Variant(id="a", index=0, title="Red")
    untitled = Variant(id="b", index=1)

    aggregator.annotate([short, untitled])

    assert short.inventory_width == 97
    assert untitled.inventory_width == 0


def test_width_goes_negative_for_long_titles(aggregator):
    variant = Variant(
        id="a",
        index=0,
        inventory_management=True,
        inventory_available_to_sell=1,
        title="x" * 120,
    )
    other = Variant(id="b", index=1, inventory_management=True, inventory_available_to_sell=3)

    aggregator.annotate([variant, other])

    assert variant.inventory_percentage == 25
    assert variant.inventory_width == 25 - 120


def test_output_sorted_by_index_regardless_of_input_order(aggregator):
    c = Variant(id="c", index=2)
    a = Variant(id="a", index=0)
    b = Variant(id="b", index=1)

    assert [v.id for v in aggregator.annotate([c, a, b])] == ["a", "b", "c"]
    assert [v.id for v in aggregator.annotate([b, c, a])] == ["a", "b", "c"]


def test_sort_is_stable_for_equal_indices(aggregator):
    first = Variant(id="first", index=1)
    second = Variant(id="second", index=1)
    zero = Variant(id="zero", index=0)

    result = aggregator.annotate([first, second, zero])

    assert [v.id for v in result] == ["zero", "first", "second"]


def test_annotate_keeps_identities_and_recomputes_total(aggregator):
    a = Variant(id="a", index=0, inventory_management=True, inventory_available_to_sell=5)
    b = Variant(id="b", index=1, inventory_management=True, inventory_available_to_sell=5)

    first = aggregator.annotate([a, b])
    a.inventory_available_to_sell = 15
    second = aggregator.annotate([a, b])

    assert first[0] is a and second[0] is a
    assert a.inventory_total == 20
    assert a.inventory_percentage == 75
