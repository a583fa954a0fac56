"""Controller behind the product detail page's variant list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, List, Optional, Protocol

from PySide6.QtCore import QCoreApplication

from ...application.interfaces import (
    IAlertPresenter,
    IAuthorizationService,
    ICatalogStore,
    IMediaStore,
    IPanelState,
    IRemoteProductService,
    IUiState,
)
from ...config import (
    ADD_VARIANT_FAIL_TEXT,
    CLOSE_LABEL_TEXT,
    CREATE_PRODUCT_PERMISSION,
    EDIT_FOCUS_KEY,
    TRANSLATION_CONTEXT,
    VARIANT_CARD_PREFIX,
    VARIANT_FORM_FLAG_PREFIX,
    VISIBILITY_FIELD,
)
from ...domain.models import (
    External,
    LocalOverride,
    MediaRecord,
    Product,
    SiblingSource,
    Variant,
    variant_id_set,
)
from ...domain.services import InventoryAggregator, SelectionMatcher, VariantOrderer
from ...errors import VariantCreationError, VariantNotFoundError
from ...errors.handler import ErrorHandler, ErrorSeverity
from ...events import (
    EventBus,
    VariantCreationFailedEvent,
    VariantEditCompletedEvent,
    VariantOrderPersistedEvent,
    VariantSelectedEvent,
    VariantsReorderedEvent,
)
from ..viewmodels import BaseViewModel, ObservableProperty, Signal


class TaskQueue(Protocol):
    def submit(self, name: str, fn: Any, *args: Any, **kwargs: Any) -> Any:
        ...


class SelectionState(Enum):
    UNSELECTED = "unselected"
    SELECTED = "selected"


@dataclass(frozen=True)
class VariantListData:
    """Everything the rendering layer needs to draw one frame of the list."""

    variants: List[Variant] = field(default_factory=list)
    child_variants: List[Variant] = field(default_factory=list)
    child_variant_media: List[MediaRecord] = field(default_factory=list)
    selected_variant: Optional[Variant] = None
    editable: bool = False
    product_handle: Optional[str] = None


class VariantListController(BaseViewModel):
    """Selection, inventory bars and drag reordering for top-level variants.

    The sibling list comes from the catalog store until the user drags a
    variant.  From then on the controller serves its own order (a
    :class:`LocalOverride`) and ignores store refreshes of the same variants
    until the position update for the latest drag has completed and the
    store reports that order back.
    """

    def __init__(
        self,
        catalog: ICatalogStore,
        authorization: IAuthorizationService,
        remote: IRemoteProductService,
        panel: IPanelState,
        alerts: IAlertPresenter,
        ui_state: IUiState,
        media: IMediaStore,
        tasks: TaskQueue,
        event_bus: EventBus,
        *,
        error_handler: Optional[ErrorHandler] = None,
        aggregator: Optional[InventoryAggregator] = None,
        matcher: Optional[SelectionMatcher] = None,
        orderer: Optional[VariantOrderer] = None,
    ) -> None:
        super().__init__()
        self._catalog = catalog
        self._authorization = authorization
        self._remote = remote
        self._panel = panel
        self._alerts = alerts
        self._ui_state = ui_state
        self._media = media
        self._tasks = tasks
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)
        self._errors = error_handler or ErrorHandler(self._logger, event_bus)
        self._aggregator = aggregator or InventoryAggregator()
        self._matcher = matcher or SelectionMatcher()
        self._orderer = orderer or VariantOrderer()

        self._source: SiblingSource = External([])
        self._generation = 0

        # Observable properties
        self.variants = ObservableProperty([])
        self.selected_variant = ObservableProperty(None)

        # Signals for one-shot notifications
        self.variants_reordered = Signal()
        self.selection_changed = Signal()
        self.creation_failed = Signal()

        self.subscribe_event(event_bus, VariantOrderPersistedEvent, self._on_order_persisted)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def source(self) -> SiblingSource:
        return self._source

    @property
    def state(self) -> SelectionState:
        if self.selected_variant.value is None:
            return SelectionState.UNSELECTED
        return SelectionState.SELECTED

    @property
    def editable(self) -> bool:
        return bool(self._authorization.has_permission([CREATE_PRODUCT_PERMISSION]))

    @property
    def product_handle(self) -> Optional[str]:
        product = self._catalog.selected_product()
        if product is None:
            return None
        return product.display_handle

    def top_variants(self) -> List[Variant]:
        """Return the store's top-level variants, annotated and sorted by index."""

        variants = self._catalog.get_top_variants()
        if not variants:
            return []
        return self._aggregator.annotate(variants)

    def is_variant_selected(self, variant_id: str) -> bool:
        return self._matcher.is_selected(variant_id, self._catalog.selected_variant())

    def is_variant_in_action_view(self, variant_id: str) -> bool:
        return self._matcher.is_active_in_panel(
            variant_id,
            self._catalog.selected_variant(),
            self._panel.get_active_panel_data(),
            self._panel.is_panel_open(),
        )

    def is_sold_out(self, variant: Variant) -> bool:
        return variant.is_sold_out

    def display_price(self, variant_id: str) -> Any:
        return self._catalog.get_variant_price_range(variant_id)

    def child_variants(self) -> List[Variant]:
        children = self._catalog.get_child_variants()
        if not isinstance(children, list):
            return []
        return children

    def child_variant_media(self) -> List[MediaRecord]:
        """Return media for the child variants, lowest ``priority`` first."""

        children = self._catalog.get_child_variants()
        if not isinstance(children, list):
            return []
        records = self._media.find_for_variants(self._orderer.ordered_ids(children))
        return sorted(records, key=lambda record: record.priority)

    def snapshot(self) -> VariantListData:
        return VariantListData(
            variants=list(self.variants.value),
            child_variants=self.child_variants(),
            child_variant_media=self.child_variant_media(),
            selected_variant=self.selected_variant.value,
            editable=self.editable,
            product_handle=self.product_handle,
        )

    # ------------------------------------------------------------------
    # External refresh
    # ------------------------------------------------------------------
    def refresh(self, force: bool = False) -> List[Variant]:
        """Pull the top-level variants from the store.

        While a local order exists for the same set of variants the store's
        copy is ignored until the position update has completed and the store
        reports that same order back.  *force*, or a store list with different
        variants in it, always replaces the local order.  Observers are
        notified even when the list holds the same objects, since the
        inventory fields were recomputed in place.
        """

        external = self.top_variants()
        source = self._source
        if (
            not force
            and source.is_override
            and variant_id_set(external) == variant_id_set(source.variants)
            and not self._store_matches(source, external)
        ):
            self._logger.debug(
                "Ignoring store refresh; local order #%d has not round-tripped yet",
                source.generation,
            )
            return list(self.variants.value)

        self._source = External(external)
        self.variants.set(external, notify=True)
        return external

    # ------------------------------------------------------------------
    # User interaction
    # ------------------------------------------------------------------
    def select_for_edit(self, variant: Variant, ancestor_depth: int = -1) -> bool:
        """Open *variant* (or one of its ancestors) for editing.

        A non-negative *ancestor_depth* edits ``variant.ancestors[depth]``
        instead of the variant itself.  Returns ``False`` so the view skips
        its default click handling.
        """

        edit_variant = self._resolve_edit_target(variant, ancestor_depth)

        self._ui_state.set(EDIT_FOCUS_KEY, f"{VARIANT_CARD_PREFIX}{edit_variant.id}")
        self._catalog.set_current_variant(edit_variant.id)
        self._ui_state.set(f"{VARIANT_FORM_FLAG_PREFIX}{edit_variant.id}", True)

        if self._authorization.has_permission([CREATE_PRODUCT_PERMISSION]):
            self.selected_variant.value = variant
            self.selection_changed.emit(variant)
            self._event_bus.publish(
                VariantSelectedEvent(variant_id=variant.id, edit_target_id=edit_variant.id)
            )

        return False

    def handle_variant_click(self, variant: Variant, ancestor_depth: int = -1) -> bool:
        return self.select_for_edit(variant, ancestor_depth)

    def complete_edit(self) -> None:
        previous = self.selected_variant.value
        if previous is None:
            return
        self.selected_variant.value = None
        self.selection_changed.emit(None)
        self._event_bus.publish(VariantEditCompletedEvent(variant_id=previous.id))

    def toggle_visibility(self, variant: Variant, visible: bool) -> None:
        self._remote.update_product_field(variant.id, VISIBILITY_FIELD, visible)

    def create_variant(self) -> None:
        product = self._catalog.selected_product()
        if product is None:
            self._logger.warning("Cannot create a variant without a selected product")
            return
        self._remote.create_variant(product.id, partial(self._on_variant_created, product))

    def move_variant(self, from_index: int, to_index: int) -> List[Variant]:
        """Move a variant within the list and persist the new order later.

        The new order is applied to :attr:`variants` before the position
        update is handed to the task queue, so the list never waits on the
        round trip.  A failed update is not rolled back.
        """

        current = list(self.variants.value)
        new_order = self._orderer.reorder(current, from_index, to_index)
        moved = current[from_index]

        self._generation += 1
        generation = self._generation
        self._source = LocalOverride(new_order, generation=generation)
        self.variants.value = new_order

        ordered_ids = self._orderer.ordered_ids(new_order)
        shop_id = moved.shop_id
        self.variants_reordered.emit(new_order)
        self._event_bus.publish(
            VariantsReorderedEvent(variant_ids=ordered_ids, shop_id=shop_id, generation=generation)
        )

        future = self._tasks.submit(
            "updateVariantsPosition",
            self._remote.update_variants_position,
            ordered_ids,
            shop_id,
        )
        future.add_done_callback(partial(self._on_positions_saved, ordered_ids, shop_id, generation))
        return new_order

    def dispose(self) -> None:
        self._source = External([])
        self.variants.set([], notify=True)
        self.selected_variant.value = None
        for signal in (self.variants_reordered, self.selection_changed, self.creation_failed):
            signal.disconnect_all()
        super().dispose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _store_matches(self, source: LocalOverride, external: List[Variant]) -> bool:
        if not source.confirmed:
            return False
        return self._orderer.ordered_ids(external) == self._orderer.ordered_ids(source.variants)

    def _resolve_edit_target(self, variant: Variant, ancestor_depth: int) -> Variant:
        if ancestor_depth < 0:
            return variant
        if ancestor_depth >= len(variant.ancestors):
            raise VariantNotFoundError(
                f"Variant {variant.id} has no ancestor at depth {ancestor_depth}"
            )
        ancestor_id = variant.ancestors[ancestor_depth]
        ancestor = self._catalog.find_variant(ancestor_id)
        if ancestor is None:
            raise VariantNotFoundError(f"Ancestor variant {ancestor_id} not found")
        return ancestor

    def _on_variant_created(self, product: Product, error: Optional[Exception]) -> None:
        if error is None:
            return

        message = QCoreApplication.translate(TRANSLATION_CONTEXT, ADD_VARIANT_FAIL_TEXT).format(
            title=product.title
        )
        close_label = QCoreApplication.translate(TRANSLATION_CONTEXT, CLOSE_LABEL_TEXT)
        self._alerts.show(message, close_label)

        self._errors.handle(
            VariantCreationError(f"{product.id}: {error}"),
            ErrorSeverity.ERROR,
            context={"product_id": product.id},
        )
        self._event_bus.publish(
            VariantCreationFailedEvent(
                product_id=product.id,
                product_title=product.title,
                reason=str(error),
            )
        )
        self.creation_failed.emit(message)

    def _on_positions_saved(self, ordered_ids: List[str], shop_id: str, generation: int, future: Any) -> None:
        if self.disposed or future.cancelled() or future.exception() is not None:
            return
        self._event_bus.publish(
            VariantOrderPersistedEvent(variant_ids=ordered_ids, shop_id=shop_id, generation=generation)
        )

    def _on_order_persisted(self, event: VariantOrderPersistedEvent) -> None:
        source = self._source
        if not source.is_override or source.generation != event.generation:
            return
        if self._orderer.ordered_ids(source.variants) != list(event.variant_ids):
            return
        self._source = source.confirm()
        self._logger.debug("Local order #%d confirmed by the store", event.generation)
