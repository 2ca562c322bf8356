"""Keyboard dispatch for the bookmark tree."""

from __future__ import annotations

from .key_registry import KeyComboBinding, KeyComboRegistry
from .key_tree import TreeKeyHandler, normalize_key

__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "TreeKeyHandler",
    "normalize_key",
]
