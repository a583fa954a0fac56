from .inventory import InventoryAggregator
from .ordering import VariantOrderer
from .selection import SelectionMatcher

__all__ = [
    "InventoryAggregator",
    "SelectionMatcher",
    "VariantOrderer",
]
