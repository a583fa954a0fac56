from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(eq=False)
class Variant:
    """A sellable variant of a product, possibly nested under other variants.

    Equality is identity: the aggregator annotates records in place and the
    orderer moves them around, so two variants are "the same" only if they
    are the same object.
    """

    id: str
    ancestors: List[str] = field(default_factory=list)  # root-to-parent ids
    index: int = 0
    title: Optional[str] = None
    inventory_management: bool = False
    inventory_available_to_sell: Optional[int] = 0
    is_visible: bool = True
    shop_id: str = ""

    # Derived per aggregation pass, never persisted
    inventory_total: int = 0
    inventory_percentage: int = 0
    inventory_width: int = 0

    @property
    def is_top_level(self) -> bool:
        return not self.ancestors

    @property
    def is_sold_out(self) -> bool:
        qty = self.inventory_available_to_sell
        return qty is not None and qty < 1


@dataclass
class Product:
    id: str
    title: str = ""
    handle: str = ""
    published_handle: Optional[str] = None
    shop_id: str = ""

    @property
    def display_handle(self) -> str:
        """Prefer the published handle; drafts fall back to the working one."""
        return self.published_handle or self.handle


@dataclass
class MediaRecord:
    id: str
    variant_id: str
    priority: int = 0
    url: Optional[str] = None
