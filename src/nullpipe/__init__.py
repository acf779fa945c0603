"""nullpipe: short-circuiting function chains over declared nullish values.

Chain fallible functions without checking the result after every call.
Once a step returns one of the chain's nullish markers, later functions are
skipped and the marker reaches the end unchanged. Sync and async variants.

Flat imports (preferred):
    from nullpipe import monad, monad_async, monad_setup, short_circuit

Submodule imports:
    from nullpipe.chain import Step, bind, pipe
    from nullpipe.async_ import AsyncStep, Pending, bind_async, pipe_async
    from nullpipe.nullish import is_nullish
"""

# Configuration
from nullpipe._config import ChainConfig, get_config, init, reset

# Logging
from nullpipe._logging import configure_logging, get_logger

# Async chains
from nullpipe.async_ import (
    AsyncStep,
    Pending,
    bind_async,
    monad_async,
    monad_async_run,
    monad_async_setup,
    pipe_async,
)

# Sync chains
from nullpipe.chain import Step, bind, monad, monad_run, monad_setup, pipe

# Decorators
from nullpipe.decorators import short_circuit, short_circuit_async

# Errors
from nullpipe.errors import NullishValue, NullishValueError

# Predicate
from nullpipe.nullish import is_nullish

__all__ = [
    'AsyncStep',
    'ChainConfig',
    'NullishValue',
    'NullishValueError',
    'Pending',
    'Step',
    'bind',
    'bind_async',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'is_nullish',
    'monad',
    'monad_async',
    'monad_async_run',
    'monad_async_setup',
    'monad_run',
    'monad_setup',
    'pipe',
    'pipe_async',
    'reset',
    'short_circuit',
    'short_circuit_async',
]
