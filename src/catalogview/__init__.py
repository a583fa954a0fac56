"""Presentation state for hierarchical product-variant lists."""

__version__ = "0.1.0"
