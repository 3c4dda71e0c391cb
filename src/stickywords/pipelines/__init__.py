"""Pipeline entry points for Sticky Words.

Currently exposed:

- :func:`get_word_card`: quote → complex word → definition
  (implemented in ``word_card.py``).
- :func:`get_curated_word`: curated word enriched with a screenplay
  (implemented in ``curated.py``).
- :class:`WordService`: bundles the configured sources for the API and CLI.
"""

from __future__ import annotations

from .curated import get_curated_word
from .service import WordService
from .word_card import acquire_quote, first_quote, get_word_card

__all__ = ["WordService", "acquire_quote", "first_quote", "get_curated_word", "get_word_card"]
