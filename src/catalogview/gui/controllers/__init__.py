"""Controllers consumed by the rendering layer."""

from .variant_list_controller import (
    SelectionState,
    VariantListController,
    VariantListData,
)

__all__ = [
    "SelectionState",
    "VariantListController",
    "VariantListData",
]
