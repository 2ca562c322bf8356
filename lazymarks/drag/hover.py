"""Hover-to-expand timer for collapsed folders during a drag.

A single pending deadline keyed by the hovered id, driven by an injected
monotonic clock::

    HoverIdle -> HoverPending(id, deadline) -> HoverExpired(id)
                                            -> HoverCancelled(id)

The host polls; nothing runs in the background.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

DEFAULT_HOVER_EXPAND_SECONDS = 1.0


@dataclass(frozen=True)
class HoverIdle:
    pass


@dataclass(frozen=True)
class HoverPending:
    node_id: str
    deadline: float


@dataclass(frozen=True)
class HoverExpired:
    node_id: str


@dataclass(frozen=True)
class HoverCancelled:
    node_id: str


HoverState = Union[HoverIdle, HoverPending, HoverExpired, HoverCancelled]


class HoverExpandTimer:
    """Cancellable single-shot deadline for the entry under the pointer."""

    def __init__(
        self,
        delay_seconds: float = DEFAULT_HOVER_EXPAND_SECONDS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay_seconds = max(0.0, float(delay_seconds))
        self._monotonic = monotonic
        self.state: HoverState = HoverIdle()
        self._hovered_id: str | None = None

    @property
    def hovered_id(self) -> str | None:
        """Id of the current continuous hover, armed or not."""
        return self._hovered_id

    def hover(self, node_id: str | None, active_id: str | None = None) -> None:
        """Report the entry under the pointer.

        A new id cancels any pending deadline and arms a fresh one. Repeating
        the same id keeps the running deadline. ``None`` cancels. Hovering the
        dragged entry itself never arms.
        """
        if node_id is None:
            self.cancel()
            self._hovered_id = None
            return
        if node_id == self._hovered_id:
            return

        self.cancel()
        self._hovered_id = node_id
        if node_id == active_id:
            return
        self.state = HoverPending(node_id, self._monotonic() + self.delay_seconds)

    def poll(self) -> str | None:
        """Return the hovered id once its deadline has passed."""
        state = self.state
        if not isinstance(state, HoverPending):
            return None
        if self._monotonic() < state.deadline:
            return None
        self.state = HoverExpired(state.node_id)
        logger.debug("hover expired on %s", state.node_id)
        return state.node_id

    def cancel(self) -> None:
        """Drop a pending deadline without firing it."""
        state = self.state
        if isinstance(state, HoverPending):
            self.state = HoverCancelled(state.node_id)

    def reset(self) -> None:
        """Forget the hovered id and return to idle."""
        self.cancel()
        self._hovered_id = None
        self.state = HoverIdle()
