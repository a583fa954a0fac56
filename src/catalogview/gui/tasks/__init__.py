"""Event loop tasks."""

from __future__ import annotations

from .deferred import DeferredCallQueue

__all__ = [
    "DeferredCallQueue",
]
