"""
Smoke tests for package structure and availability.

These tests strictly verify that the package is installed correctly in the
environment and that top-level modules are importable.
"""

from __future__ import annotations

import importlib

from stickywords import __version__


def test_package_importable() -> None:
    mod = importlib.import_module("stickywords")
    assert mod is not None


def test_version_is_set() -> None:
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_cli_module_exposes_app() -> None:
    """The `stickywords` console script points at `stickywords.cli:app`."""
    cli = importlib.import_module("stickywords.cli")
    assert hasattr(cli, "app")


def test_curated_word_list_is_well_formed() -> None:
    from stickywords.core.word_list import CURATED_WORDS

    assert len(CURATED_WORDS) >= 10
    assert len({w.word for w in CURATED_WORDS}) == len(CURATED_WORDS)
    assert all(w.definition and w.category for w in CURATED_WORDS)
