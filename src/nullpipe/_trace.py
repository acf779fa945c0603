"""Trace events emitted by the invokers when ``ChainConfig.trace`` is on."""

from __future__ import annotations

from typing import Any

from nullpipe._config import get_config
from nullpipe._logging import LOGGER_NAME, get_logger

_CHAIN_LOGGER = f'{LOGGER_NAME}.chain'


def _fn_name(fn: Any) -> str:
    return getattr(fn, '__qualname__', None) or repr(fn)


def trace_short_circuit(value: Any, fn: Any) -> None:
    if get_config().trace:
        get_logger(_CHAIN_LOGGER).debug(
            'chain.short_circuit', value=repr(value), skipped=_fn_name(fn)
        )


def trace_invoke(fn: Any) -> None:
    if get_config().trace:
        get_logger(_CHAIN_LOGGER).debug('chain.invoke', fn=_fn_name(fn))
