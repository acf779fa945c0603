"""@short_circuit and @short_circuit_async: bind as a decorator."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from nullpipe._config import get_config
from nullpipe.async_.chain import bind_async
from nullpipe.chain import bind

__all__ = ['short_circuit', 'short_circuit_async']


def short_circuit(*markers: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator factory: skip the function when its first argument is nullish.

    The first positional argument is returned unchanged if it matches one
    of ``markers``; otherwise the function is called normally. With no
    markers, the configured default set is read at call time.

    Args:
        *markers: Nullish markers.

    Returns:
        A decorator.

    Example:
        ```python
        @short_circuit(None, -1)
        def double(x: int) -> int:
            return x * 2

        double(4)   # 8
        double(-1)  # -1
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        if not args:
            return wrapped(*args, **kwargs)
        return bind(wrapped, markers or get_config().default_nullish, *args, **kwargs)

    return wrapper


def short_circuit_async(
    *markers: Any,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Any]]]:
    """Async variant of ``short_circuit``.

    The first positional argument may be awaitable; it is settled before
    the nullish check, and the decorated function receives the plain value.

    Example:
        ```python
        @short_circuit_async(None)
        async def fetch_user(user_id: str) -> User | None:
            ...

        await fetch_user(None)  # None, fetch_user body never runs
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        if not args:
            return await wrapped(*args, **kwargs)
        return await bind_async(wrapped, markers or get_config().default_nullish, *args, **kwargs)

    return wrapper
