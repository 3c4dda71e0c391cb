"""Core package for Sticky Words.

Holds configuration, the ``Result`` type, text heuristics, the request quota
and learner progress. Import from the submodules directly, e.g.::

    from stickywords.core.settings import settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
