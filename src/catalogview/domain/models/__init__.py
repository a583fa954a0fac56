from .core import MediaRecord, Product, Variant
from .sources import External, LocalOverride, SiblingSource, variant_id_set

__all__ = [
    "External",
    "LocalOverride",
    "MediaRecord",
    "Product",
    "SiblingSource",
    "Variant",
    "variant_id_set",
]
