"""Synchronous short-circuiting chains.

A chain threads a value through a sequence of functions. As soon as a
function returns one of the chain's nullish markers, every later function
is skipped and the marker is carried through to the end unchanged.

Example:
    ```python
    from nullpipe.chain import monad

    step = (
        monad('firstUser', None)
        .pipe(get_user)
        .pipe(get_user_preference)
        .pipe(get_preferred_item_id)
        .pipe(get_item_details)
    )
    step.value  # the item record, or None if any lookup missed
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from nullpipe._config import get_config
from nullpipe._trace import trace_invoke, trace_short_circuit
from nullpipe.errors import NullishValueError
from nullpipe.nullish import is_nullish
from nullpipe.types import StepFactory

__all__ = [
    'Step',
    'bind',
    'monad',
    'monad_run',
    'monad_setup',
    'pipe',
]


def bind(
    fn: Callable[..., Any],
    markers: tuple[Any, ...],
    first: Any,
    /,
    *args: Any,
    **kwargs: Any,
) -> Any:
    """Call ``fn(first, *args, **kwargs)`` unless ``first`` is nullish.

    If ``first`` matches one of ``markers`` it is returned unchanged and
    ``fn`` is not called. The result of ``fn`` is returned as is; whether it
    is nullish is decided by the next ``bind``. Exceptions raised by ``fn``
    propagate unchanged.

    Args:
        fn: Function to invoke.
        markers: The chain's nullish markers.
        first: Value passed as the first argument.
        *args: Extra positional arguments, passed after ``first``.
        **kwargs: Extra keyword arguments.

    Returns:
        ``first`` if it is nullish, otherwise whatever ``fn`` returns.
    """
    if is_nullish(first, markers):
        trace_short_circuit(first, fn)
        return first
    trace_invoke(fn)
    return fn(first, *args, **kwargs)


@dataclass(slots=True, frozen=True)
class Step[T]:
    """One node of a sync chain.

    Attributes:
        value: The current value, possibly one of the nullish markers.
        next: Continuation that invokes a function on ``value`` and returns
            the following step.
        markers: The chain's nullish markers, fixed for the whole chain.
    """

    value: T
    next: StepFactory = field(repr=False, compare=False)
    markers: tuple[Any, ...] = field(default=(None,), repr=False)

    def pipe(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Step[Any]:
        """Extend the chain with ``fn``; same as ``self.next(fn, ...)``."""
        return self.next(fn, *args, **kwargs)

    @property
    def is_nullish(self) -> bool:
        """True if the current value is one of the chain's markers."""
        return is_nullish(self.value, self.markers)

    def unwrap(self) -> T:
        """Return the value, or raise NullishValueError if it is nullish."""
        if is_nullish(self.value, self.markers):
            raise NullishValueError(self.value)
        return self.value


def pipe(prev: Any, markers: tuple[Any, ...]) -> StepFactory:
    """Build the continuation for a chain currently holding ``prev``.

    Args:
        prev: The current chain value.
        markers: The chain's nullish markers.

    Returns:
        A step factory: calling it with a function and extra arguments
        binds the function to ``prev`` and returns the resulting Step.
    """

    def step(fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Step[Any]:
        value = bind(fn, markers, prev, *args, **kwargs)
        return Step(value, pipe(value, markers), markers)

    return step


def monad[T](first: T, *markers: Any) -> Step[T]:
    """Start a chain at ``first`` with the given nullish markers.

    Example:
        ```python
        monad(5, None).pipe(lambda x: x + 1).value   # 6
        monad(None, None).pipe(lambda x: x + 1).value  # None
        ```
    """
    return Step(first, pipe(first, markers), markers)


def monad_run(fn: Callable[..., Any], first: Any, /, *args: Any, **kwargs: Any) -> Step[Any]:
    """Start a chain with the default markers and immediately apply ``fn``.

    The default marker set is ``(None,)`` unless changed with ``init``.
    """
    return monad(first, *get_config().default_nullish).pipe(fn, *args, **kwargs)


def monad_setup(*markers: Any) -> Callable[..., Step[Any]]:
    """Fix a marker set and return a runner for one-step chains.

    Example:
        ```python
        run = monad_setup(-1, None)
        run(str, -1).value  # -1, str is never called
        run(str, 0).value   # '0'
        ```
    """

    def run(fn: Callable[..., Any], first: Any, /, *args: Any, **kwargs: Any) -> Step[Any]:
        return monad(first, *markers).pipe(fn, *args, **kwargs)

    return run
