"""Sticky Words: vocabulary cards built from quotes and dictionary lookups."""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"
