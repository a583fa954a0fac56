"""Default configuration values for catalogview."""

from __future__ import annotations

from typing import Final

# Percentage reported for variants whose stock is untracked or whose sibling
# group has no tracked stock at all.  The inventory bar renders "full" for it.
FULL_STOCK_PERCENTAGE: Final[int] = 100

# Capability required before a click may move the list into edit selection.
CREATE_PRODUCT_PERMISSION: Final[str] = "createProduct"

# ---------------------------------------------------------------------------
# UI state keys
# ---------------------------------------------------------------------------

EDIT_FOCUS_KEY: Final[str] = "edit/focus"
VARIANT_CARD_PREFIX: Final[str] = "variant-"
VARIANT_FORM_FLAG_PREFIX: Final[str] = "variant-form-"

# Product field toggled by the visibility switch on each variant row.
VISIBILITY_FIELD: Final[str] = "isVisible"

# ---------------------------------------------------------------------------
# Event loop timings
# ---------------------------------------------------------------------------

# Delay before the reorder persistence call runs.  Zero means "next event
# loop turn", after the local order is already visible.
PERSIST_DEFER_MS: Final[int] = 0

# ---------------------------------------------------------------------------
# Translations
# ---------------------------------------------------------------------------

TRANSLATION_CONTEXT: Final[str] = "VariantList"
ADD_VARIANT_FAIL_TEXT: Final[str] = "Failed to add a variant to {title}."
CLOSE_LABEL_TEXT: Final[str] = "Close"
