from dataclasses import dataclass, field

from .domain_events import DomainEvent


@dataclass(frozen=True)
class VariantSelectedEvent(DomainEvent):
    variant_id: str = ""
    edit_target_id: str = ""


@dataclass(frozen=True)
class VariantEditCompletedEvent(DomainEvent):
    variant_id: str = ""


@dataclass(frozen=True)
class VariantsReorderedEvent(DomainEvent):
    variant_ids: list[str] = field(default_factory=list)
    shop_id: str = ""
    generation: int = 0


@dataclass(frozen=True)
class VariantOrderPersistedEvent(DomainEvent):
    variant_ids: list[str] = field(default_factory=list)
    shop_id: str = ""
    generation: int = 0


@dataclass(frozen=True)
class VariantCreationFailedEvent(DomainEvent):
    product_id: str = ""
    product_title: str = ""
    reason: str = ""
