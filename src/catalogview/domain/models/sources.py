"""Where the variant list currently takes its sibling order from.

``External`` mirrors the catalog store.  ``LocalOverride`` holds an
optimistic reorder that has not yet been round-tripped through the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Union

from .core import Variant


@dataclass(frozen=True)
class External:
    variants: List[Variant] = field(default_factory=list)

    @property
    def is_override(self) -> bool:
        return False


@dataclass(frozen=True)
class LocalOverride:
    variants: List[Variant] = field(default_factory=list)
    generation: int = 0
    confirmed: bool = False

    @property
    def is_override(self) -> bool:
        return True

    def confirm(self) -> LocalOverride:
        return replace(self, confirmed=True)


SiblingSource = Union[External, LocalOverride]


def variant_id_set(variants: List[Variant]) -> frozenset[str]:
    return frozenset(variant.id for variant in variants)
