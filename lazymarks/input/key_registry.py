"""Named key bindings with a normalized dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class KeyComboBinding(Generic[ResultT]):
    """One action reachable through one or more key tokens."""

    name: str
    combos: tuple[str, ...]
    handler: Callable[[], ResultT]


class KeyComboRegistry(Generic[ResultT]):
    """Dispatch table from normalized key tokens to named actions.

    Later bindings take over tokens already bound; the displaced action keeps
    its remaining tokens in ``describe``.
    """

    def __init__(self, normalize: Callable[[str], str] = str) -> None:
        """Create an empty table; ``normalize`` maps raw keys to lookup tokens."""
        self._normalize = normalize
        self._by_key: dict[str, KeyComboBinding[ResultT]] = {}
        self._order: list[str] = []

    def register_bindings(self, *bindings: KeyComboBinding[ResultT]) -> KeyComboRegistry[ResultT]:
        """Bind every token of each binding and return ``self`` for chaining."""
        for binding in bindings:
            if binding.name not in self._order:
                self._order.append(binding.name)
            for combo in binding.combos:
                self._by_key[self._normalize(combo)] = binding
        return self

    def binding_for(self, key: str) -> KeyComboBinding[ResultT] | None:
        """Binding currently owning ``key`` after normalization, if any."""
        return self._by_key.get(self._normalize(key))

    def dispatch(self, key: str) -> ResultT | None:
        """Run the action bound to ``key``; ``None`` when unbound."""
        binding = self.binding_for(key)
        if binding is None:
            return None
        return binding.handler()

    def describe(self) -> list[tuple[str, tuple[str, ...]]]:
        """``(action name, live tokens)`` pairs in registration order."""
        tokens: dict[str, list[str]] = {name: [] for name in self._order}
        for key, binding in self._by_key.items():
            tokens[binding.name].append(key)
        return [(name, tuple(tokens[name])) for name in self._order if tokens[name]]
