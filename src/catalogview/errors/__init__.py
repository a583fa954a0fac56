"""Custom exception hierarchy for catalogview."""

from __future__ import annotations


class CatalogViewError(Exception):
    """Base class for all custom errors raised by catalogview."""


# --- 2-layer hierarchy ---

class DomainError(CatalogViewError):
    """Base class for domain-level errors."""


class ApplicationError(CatalogViewError):
    """Base class for application-level errors."""


# --- Domain errors ---

class VariantNotFoundError(DomainError):
    """Raised when a variant referenced by id cannot be located."""


class ReorderIndexError(DomainError, IndexError):
    """Raised when a reorder is requested with an out-of-range position."""


# --- Application errors ---

class VariantCreationError(ApplicationError):
    """Raised (and reported) when the remote create-variant request fails."""
