"""Asynchronous short-circuiting chains.

Same contract as ``nullpipe.chain`` but every step value is a Pending.
Functions may be sync or async, and the starting value may itself be
awaitable. Extending a chain never suspends. Inside a running event loop
each stage is started as soon as it is added; built outside one, stages
start when a value is first awaited. Either way they run in chain order.

Example:
    ```python
    async def main():
        step = (
            monad_async('firstUser', None)
            .pipe(get_user_async)
            .pipe(get_user_preference)  # sync functions work too
            .pipe(get_preferred_item_id_async)
        )
        item_id = await step.value
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from typing import Any

from nullpipe._config import get_config
from nullpipe._trace import trace_invoke, trace_short_circuit
from nullpipe.async_.pending import Pending, settle
from nullpipe.errors import NullishValueError
from nullpipe.nullish import is_nullish
from nullpipe.types import AsyncStepFactory

__all__ = [
    'AsyncStep',
    'bind_async',
    'monad_async',
    'monad_async_run',
    'monad_async_setup',
    'pipe_async',
]


async def bind_async(
    fn: Callable[..., Any],
    markers: tuple[Any, ...],
    first: Any,
    /,
    *args: Any,
    **kwargs: Any,
) -> Any:
    """Await ``first`` if needed, then call ``fn`` on it unless it is nullish.

    ``fn`` may return a plain value or an awaitable; either way the result
    is settled to a plain value. Exceptions from awaiting ``first`` or from
    ``fn`` propagate unchanged.

    Args:
        fn: Sync or async function to invoke.
        markers: The chain's nullish markers.
        first: Value, or awaitable of the value, passed as the first argument.
        *args: Extra positional arguments, passed after ``first``.
        **kwargs: Extra keyword arguments.

    Returns:
        The settled ``first`` if it is nullish, otherwise the settled result of ``fn``.
    """
    resolved = await settle(first)
    if is_nullish(resolved, markers):
        trace_short_circuit(resolved, fn)
        return resolved
    trace_invoke(fn)
    return await settle(fn(resolved, *args, **kwargs))


@dataclass(slots=True, frozen=True)
class AsyncStep[T]:
    """One node of an async chain.

    Awaiting the step is the same as awaiting ``step.value``.

    Attributes:
        value: Pending resolving to the current value.
        next: Continuation that schedules a function on ``value`` and
            returns the following step without suspending.
        markers: The chain's nullish markers, fixed for the whole chain.
    """

    value: Pending[T]
    next: AsyncStepFactory = field(repr=False, compare=False)
    markers: tuple[Any, ...] = field(default=(None,), repr=False)

    def pipe(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> AsyncStep[Any]:
        """Extend the chain with ``fn``; same as ``self.next(fn, ...)``."""
        return self.next(fn, *args, **kwargs)

    def __await__(self) -> Generator[Any, Any, T]:
        return self.value.__await__()

    async def is_nullish(self) -> bool:
        """Await the value and report whether it is one of the chain's markers."""
        return is_nullish(await self.value, self.markers)

    async def unwrap(self) -> T:
        """Await the value, raising NullishValueError if it is nullish."""
        value = await self.value
        if is_nullish(value, self.markers):
            raise NullishValueError(value)
        return value


def pipe_async(prev: Any, markers: tuple[Any, ...]) -> AsyncStepFactory:
    """Build the continuation for an async chain currently holding ``prev``.

    Args:
        prev: The current value, a Pending, or any other awaitable.
        markers: The chain's nullish markers.

    Returns:
        A step factory returning AsyncStep. Calling it schedules ``fn`` but
        never suspends.
    """
    source = Pending.wrap(prev) if inspect.isawaitable(prev) else prev

    def step(fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> AsyncStep[Any]:
        value: Pending[Any] = Pending(lambda: bind_async(fn, markers, source, *args, **kwargs))
        value.schedule()
        return AsyncStep(value, pipe_async(value, markers), markers)

    return step


def monad_async[T](first: T, *markers: Any) -> AsyncStep[Any]:
    """Start an async chain at ``first`` with the given nullish markers.

    ``first`` may be a plain value or an awaitable; ``value`` is always a Pending.
    """
    value = Pending.wrap(first)
    return AsyncStep(value, pipe_async(value, markers), markers)


def monad_async_run(
    fn: Callable[..., Any], first: Any, /, *args: Any, **kwargs: Any
) -> AsyncStep[Any]:
    """Start an async chain with the default markers and immediately apply ``fn``."""
    return monad_async(first, *get_config().default_nullish).pipe(fn, *args, **kwargs)


def monad_async_setup(*markers: Any) -> Callable[..., AsyncStep[Any]]:
    """Fix a marker set and return a runner for one-step async chains."""

    def run(fn: Callable[..., Any], first: Any, /, *args: Any, **kwargs: Any) -> AsyncStep[Any]:
        return monad_async(first, *markers).pipe(fn, *args, **kwargs)

    return run
