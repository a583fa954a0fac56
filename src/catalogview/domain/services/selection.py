from __future__ import annotations

from typing import Optional

from catalogview.domain.models import Variant


class SelectionMatcher:
    """Decide which rows of the variant list render as selected."""

    def is_selected(self, candidate_id: str, current_selection: Optional[Variant]) -> bool:
        """Return ``True`` for the selected variant and every one of its ancestors."""

        if current_selection is None:
            return False
        return (
            candidate_id == current_selection.id
            or candidate_id in current_selection.ancestors
        )

    def is_active_in_panel(
        self,
        candidate_id: str,
        current_selection: Optional[Variant],
        panel_variant: Optional[Variant],
        panel_open: bool,
    ) -> bool:
        """Return ``True`` when *candidate_id* is selected and shown in an open panel.

        The panel's own variant must still be part of the selection so that a
        panel left over from an earlier selection does not light up rows.
        """

        if panel_variant is None:
            return False
        return (
            self.is_selected(candidate_id, current_selection)
            and self.is_selected(panel_variant.id, current_selection)
            and bool(panel_open)
        )
