"""Shared type aliases and protocols for sync and async chains."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from nullpipe.async_.chain import AsyncStep
    from nullpipe.chain import Step

__all__ = [
    'AsyncCallback',
    'AsyncStepFactory',
    'Callback',
    'MaybeAwaitable',
    'StepFactory',
]

# Extra positional/keyword arguments are opaque: per-call arity is not
# checked statically past the first argument.
type Callback[R] = Callable[..., R]
type MaybeAwaitable[T] = T | Awaitable[T]
type AsyncCallback[R] = Callable[..., MaybeAwaitable[R]]


class StepFactory(Protocol):
    """Continuation of a sync chain: invoke ``fn`` and return the next step."""

    def __call__(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Step[Any]: ...


class AsyncStepFactory(Protocol):
    """Continuation of an async chain: schedule ``fn`` and return the next step."""

    def __call__(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> AsyncStep[Any]: ...
