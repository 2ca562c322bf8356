"""Runtime layer: browser controller, view state and persisted config."""

from __future__ import annotations

from .browser import BookmarkBrowser, BrowserSettings
from .state import BrowserState

__all__ = ["BookmarkBrowser", "BrowserSettings", "BrowserState"]
