"""Pending: a shareable, memoised awaitable for async chain values.

A coroutine can only be awaited once, but a chain value is read both by
the caller (``await step.value``) and by every step built on top of it.
Pending runs its factory exactly once in a task of its own and hands the
same result (or exception) to every awaiter.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Generator
from types import TracebackType
from typing import Any

import anyio

__all__ = ['Pending', 'settle']

# Strong references to running computations; the event loop only keeps weak ones.
_running: set[asyncio.Task[None]] = set()


async def settle(value: Any) -> Any:
    """Await ``value`` until it is no longer awaitable.

    Nested awaitables collapse to a single level, so an awaitable that
    resolves to another awaitable yields the innermost value.
    """
    while inspect.isawaitable(value):
        value = await value
    return value


class Pending[T]:
    """Awaitable that computes its value at most once.

    The computation runs in its own task. It starts as soon as ``schedule``
    is called with an event loop running, or on the first ``await``
    otherwise. Cancelling an awaiter does not cancel the computation.

    Example:
        ```python
        async def load() -> int:
            return 42

        pending = Pending(load)
        assert await pending == 42
        assert await pending == 42  # load() ran once
        ```
    """

    __slots__ = ('_done', '_error', '_event', '_factory', '_result', '_traceback')

    def __init__(self, factory: Callable[[], Awaitable[T]]) -> None:
        """Create a Pending from a zero-argument callable returning an awaitable.

        Args:
            factory: Called once, when the computation starts.
        """
        self._factory: Callable[[], Awaitable[T]] | None = factory
        self._event = anyio.Event()
        self._done = False
        self._result: T | None = None
        self._error: BaseException | None = None
        self._traceback: TracebackType | None = None

    @classmethod
    def wrap(cls, value: Any) -> Pending[Any]:
        """Return ``value`` if it is already a Pending, else a scheduled Pending settling it."""
        if isinstance(value, Pending):
            return value
        pending: Pending[Any] = cls(lambda: settle(value))
        pending.schedule()
        return pending

    @property
    def done(self) -> bool:
        """True once the value or exception has been memoised."""
        return self._done

    def schedule(self) -> None:
        """Start the computation now if an event loop is running.

        Without a running loop this is a no-op and the computation starts
        on the first await.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self._start()

    def _start(self) -> None:
        if self._factory is None:
            return
        factory, self._factory = self._factory, None
        task = asyncio.get_running_loop().create_task(self._run(factory))
        _running.add(task)
        task.add_done_callback(_running.discard)

    async def _run(self, factory: Callable[[], Awaitable[T]]) -> None:
        try:
            self._result = await settle(factory())
        except BaseException as exc:
            self._error = exc
            self._traceback = exc.__traceback__
            if not isinstance(exc, Exception):
                raise
        finally:
            self._done = True
            self._event.set()

    def __await__(self) -> Generator[Any, Any, T]:
        return self._get().__await__()

    async def _get(self) -> T:
        self._start()
        await self._event.wait()
        if self._error is not None:
            # Restore the saved traceback so repeated awaits don't keep extending it.
            raise self._error.with_traceback(self._traceback)
        return self._result  # type: ignore[return-value]

    def __repr__(self) -> str:
        if not self._done:
            return 'Pending(<unresolved>)'
        if self._error is not None:
            return f'Pending(error={self._error!r})'
        return f'Pending(value={self._result!r})'
