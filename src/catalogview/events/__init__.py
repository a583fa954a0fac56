from .bus import EventBus, Subscription
from .domain_events import DomainEvent
from .variant_events import (
    VariantCreationFailedEvent,
    VariantEditCompletedEvent,
    VariantOrderPersistedEvent,
    VariantSelectedEvent,
    VariantsReorderedEvent,
)

__all__ = [
    "DomainEvent",
    "EventBus",
    "Subscription",
    "VariantCreationFailedEvent",
    "VariantEditCompletedEvent",
    "VariantOrderPersistedEvent",
    "VariantSelectedEvent",
    "VariantsReorderedEvent",
]
