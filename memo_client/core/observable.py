from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from memo_client.logging_setup import get_logger

Listener: TypeAlias = Callable[[], None]

_log = get_logger("core")


class Observable:
    """Explicit "state changed" notifications; the view re-renders on them."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                # один сломанный listener не должен ломать остальных
                _log.exception("State listener failed: %r", listener)
