from __future__ import annotations

import logging
from typing import List, Sequence

from catalogview.domain.models import Variant
from catalogview.errors import ReorderIndexError

_LOGGER = logging.getLogger(__name__)


class VariantOrderer:
    """Move one variant within its sibling group."""

    def reorder(self, siblings: Sequence[Variant], from_index: int, to_index: int) -> List[Variant]:
        """Return a new list with the element at *from_index* moved to *to_index*.

        The element is removed first and then inserted into the shortened
        list, so this is a single-element move rather than a swap.  Indices
        outside ``range(len(siblings))`` raise :class:`ReorderIndexError`.
        """

        size = len(siblings)
        for name, value in (("from_index", from_index), ("to_index", to_index)):
            if not 0 <= value < size:
                raise ReorderIndexError(
                    f"{name}={value} is out of range for {size} sibling(s)"
                )

        reordered = list(siblings)
        moved = reordered.pop(from_index)
        reordered.insert(to_index, moved)
        _LOGGER.debug("Moved variant %s from %d to %d", moved.id, from_index, to_index)
        return reordered

    def ordered_ids(self, siblings: Sequence[Variant]) -> List[str]:
        return [variant.id for variant in siblings]
