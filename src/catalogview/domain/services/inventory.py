"""Inventory bar metrics for a group of sibling variants."""

from __future__ import annotations

from typing import Iterable, List

from catalogview.config import FULL_STOCK_PERCENTAGE
from catalogview.domain.models import Variant


def _tracked_quantity(variant: Variant) -> int:
    qty = variant.inventory_available_to_sell
    if isinstance(qty, bool) or not isinstance(qty, int):
        return 0
    return qty


class InventoryAggregator:
    """Annotate siblings with their share of the group's sellable stock."""

    def total(self, siblings: Iterable[Variant]) -> int:
        return sum(
            _tracked_quantity(variant)
            for variant in siblings
            if variant.inventory_management
        )

    def annotate(self, siblings: Iterable[Variant]) -> List[Variant]:
        """Populate the derived inventory fields and sort by ``index``.

        The variants are annotated in place and returned in a new list.  The
        percentage truncates rather than rounds, and untracked variants (or a
        group without any tracked stock) report a full bar.  The width is a
        display heuristic: the percentage minus the title length, which goes
        negative for long titles.
        """

        variants = list(siblings)
        if not variants:
            return []

        inventory_total = self.total(variants)
        for variant in variants:
            variant.inventory_total = inventory_total
            if variant.inventory_management and inventory_total:
                qty = _tracked_quantity(variant)
                variant.inventory_percentage = int(qty / inventory_total * 100)
            else:
                variant.inventory_percentage = FULL_STOCK_PERCENTAGE

            if variant.title:
                variant.inventory_width = int(variant.inventory_percentage - len(variant.title))
            else:
                variant.inventory_width = 0

        # sorted() is stable, so equal indices keep their store order
        return sorted(variants, key=lambda variant: variant.index)
