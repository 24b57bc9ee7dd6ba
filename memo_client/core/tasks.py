from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

Job: TypeAlias = Callable[[], Any]
DoneCallback: TypeAlias = Callable[[Any], None]
ErrorCallback: TypeAlias = Callable[[BaseException], None]


class TaskRunner:
    """
    Как состояние запускает сетевые вызовы.

    submit() выполняет job где-то (в фоне или сразу) и вызывает ровно один из
    колбэков в потоке, которому принадлежит состояние. call_later() нужен для
    косметической задержки при входе.
    """

    def submit(self, job: Job, on_done: DoneCallback, on_error: ErrorCallback) -> None:
        raise NotImplementedError

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> None:
        raise NotImplementedError


class ImmediateRunner(TaskRunner):
    """Synchronous runner: headless use and tests."""

    def submit(self, job: Job, on_done: DoneCallback, on_error: ErrorCallback) -> None:
        try:
            result = job()
        except Exception as exc:
            on_error(exc)
            return
        on_done(result)

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> None:
        fn()
