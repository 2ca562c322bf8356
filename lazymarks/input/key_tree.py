"""Keyboard bindings for the bookmark tree list."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..tree_model.navigation import (
    NavigationIntent,
    activate,
    enter_folder,
    entry_index_map,
    exit_folder,
    step_selection,
)
from ..tree_model.types import FlatEntry
from .key_registry import KeyComboBinding, KeyComboRegistry


def normalize_key(key: str) -> str:
    """Named keys are upper-case tokens; single letters are case-sensitive."""
    return key if len(key) == 1 else key.upper()


class TreeKeyHandler:
    """Map navigation keys to ``NavigationIntent`` for the current entries.

    ``entries`` and ``selected_id`` are read through providers at dispatch
    time so the handler never holds a stale snapshot.
    """

    def __init__(
        self,
        entries: Callable[[], Sequence[FlatEntry]],
        selected_id: Callable[[], str | None],
    ) -> None:
        self._entries = entries
        self._selected_id = selected_id
        self._registry: KeyComboRegistry[NavigationIntent] = KeyComboRegistry(normalize_key)
        self._registry.register_bindings(
            KeyComboBinding("down", ("DOWN", "j"), lambda: self._step(1)),
            KeyComboBinding("up", ("UP", "k"), lambda: self._step(-1)),
            KeyComboBinding("expand / enter folder", ("RIGHT", "l"), self._enter),
            KeyComboBinding("collapse / parent", ("LEFT", "h"), self._exit),
            KeyComboBinding("toggle / open", ("ENTER",), self._activate),
        )

    def _step(self, direction: int) -> NavigationIntent:
        entries = self._entries()
        return step_selection(entries, self._selected_id(), direction, entry_index_map(entries))

    def _enter(self) -> NavigationIntent:
        return enter_folder(self._entries(), self._selected_id())

    def _exit(self) -> NavigationIntent:
        return exit_folder(self._entries(), self._selected_id())

    def _activate(self) -> NavigationIntent:
        return activate(self._entries(), self._selected_id())

    def handle_key(self, key: str) -> NavigationIntent | None:
        """Return the intent for ``key``, or ``None`` when the key is unbound."""
        return self._registry.dispatch(key)

    def describe(self) -> list[tuple[str, tuple[str, ...]]]:
        """Bound actions with their keys, for help output."""
        return self._registry.describe()
