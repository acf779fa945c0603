"""Chain configuration: default nullish markers, logging and tracing."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from nullpipe._logging import configure_logging

__all__ = [
    'ChainConfig',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


@dataclass(frozen=True)
class ChainConfig:
    """Configuration shared by every chain in the process.

    Attributes:
        default_nullish: Markers used by ``monad_run``, ``monad_async_run`` and
            the decorators when no markers are given.
        log_level: Logging level (e.g. "DEBUG"). None leaves logging alone.
        trace: Emit a DEBUG event for every invocation and short-circuit.
    """

    default_nullish: tuple[Any, ...] = (None,)
    log_level: str | None = None
    trace: bool = False


_config: ChainConfig | None = None


def _detect_trace() -> bool:
    """Read NULLPIPE_TRACE from the environment."""
    raw = os.environ.get('NULLPIPE_TRACE', '').strip().lower()
    if raw and raw not in _TRUTHY and raw not in ('0', 'false', 'no', 'off'):
        logging.warning("Unknown NULLPIPE_TRACE value '%s', tracing disabled", raw)
    return raw in _TRUTHY


def _detect_log_level() -> str | None:
    raw = os.environ.get('NULLPIPE_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    default_nullish: tuple[Any, ...] | None = None,
    log_level: str | None = None,
    trace: bool | None = None,
) -> ChainConfig:
    """Initialize the global chain configuration.

    Args:
        default_nullish: Default marker set. Defaults to ``(None,)``.
        log_level: Logging level. Read from NULLPIPE_LOG_LEVEL if None.
        trace: Enable trace events. Read from NULLPIPE_TRACE if None.

    Returns:
        The ChainConfig that was set.

    Raises:
        ValueError: If ``default_nullish`` is empty.

    Example:
        ```python
        from nullpipe import init

        init(default_nullish=(None, -1), log_level='DEBUG', trace=True)
        ```
    """
    global _config  # noqa: PLW0603

    if default_nullish is None:
        resolved_nullish: tuple[Any, ...] = (None,)
    else:
        resolved_nullish = tuple(default_nullish)
        if not resolved_nullish:
            msg = 'default_nullish must contain at least one marker'
            raise ValueError(msg)

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_trace = trace if trace is not None else _detect_trace()

    _config = ChainConfig(
        default_nullish=resolved_nullish,
        log_level=resolved_level,
        trace=resolved_trace,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> ChainConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current configuration so the next ``get_config`` re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
