from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence

from catalogview.domain.models import MediaRecord, Product, Variant


class ICatalogStore(ABC):
    """Interface for the reactive catalog store that owns variant records."""

    @abstractmethod
    def selected_product(self) -> Optional[Product]:
        pass

    @abstractmethod
    def selected_variant(self) -> Optional[Variant]:
        pass

    @abstractmethod
    def get_top_variants(self) -> List[Variant]:
        """Return the top-level variants of the selected product, in any order."""
        pass

    @abstractmethod
    def get_child_variants(self) -> Optional[List[Variant]]:
        """Return the children of the selected top-level variant, if any."""
        pass

    @abstractmethod
    def set_current_variant(self, variant_id: str) -> None:
        pass

    @abstractmethod
    def find_variant(self, variant_id: str) -> Optional[Variant]:
        pass

    @abstractmethod
    def get_variant_price_range(self, variant_id: str) -> Any:
        pass


class IAuthorizationService(ABC):
    """Interface for capability checks against the authorization service."""

    @abstractmethod
    def has_permission(self, capabilities: Sequence[str]) -> bool:
        pass


class IRemoteProductService(ABC):
    """Interface for the remote product-update service.

    Every call is asynchronous from the caller's point of view.  Only
    ``create_variant`` reports back, through *callback*, which receives the
    error (or ``None``) once the request resolves.
    """

    @abstractmethod
    def create_variant(self, product_id: str, callback: Callable[[Optional[Exception]], None]) -> None:
        pass

    @abstractmethod
    def update_product_field(self, variant_id: str, field_name: str, value: Any) -> None:
        pass

    @abstractmethod
    def update_variants_position(self, ordered_ids: List[str], shop_id: str) -> None:
        pass


class IPanelState(ABC):
    """Interface for the auxiliary action panel."""

    @abstractmethod
    def get_active_panel_data(self) -> Optional[Variant]:
        pass

    @abstractmethod
    def is_panel_open(self) -> bool:
        pass


class IAlertPresenter(ABC):
    """Interface for user-facing alert dialogs."""

    @abstractmethod
    def show(self, message: str, confirm_label: str) -> None:
        pass


class IMediaStore(ABC):
    """Interface for locally cached media records."""

    @abstractmethod
    def find_for_variants(self, variant_ids: Sequence[str]) -> List[MediaRecord]:
        """Return media whose variant id is one of *variant_ids*, in any order."""
        pass


class IUiState(ABC):
    """Interface for transient UI/session flags keyed by string."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass
