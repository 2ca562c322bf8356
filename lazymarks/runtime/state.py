from __future__ import annotations

from dataclasses import dataclass, field

from ..tree_model.filtering import SORT_NONE
from ..tree_model.types import FlatEntry


@dataclass
class BrowserState:
    expanded: set[str] = field(default_factory=set)
    selected_id: str | None = None
    sort_type: str = SORT_NONE
    search_query: str = ""
    entries: list[FlatEntry] = field(default_factory=list)
    opened_urls: list[str] = field(default_factory=list)
