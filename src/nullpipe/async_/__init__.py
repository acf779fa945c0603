"""Async chains: AsyncStep, Pending and the async invoker."""

from nullpipe.async_.chain import (
    AsyncStep,
    bind_async,
    monad_async,
    monad_async_run,
    monad_async_setup,
    pipe_async,
)
from nullpipe.async_.pending import Pending, settle

__all__ = [
    'AsyncStep',
    'Pending',
    'bind_async',
    'monad_async',
    'monad_async_run',
    'monad_async_setup',
    'pipe_async',
    'settle',
]
