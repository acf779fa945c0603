"""Error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'NullishValue',
    'NullishValueError',
]


class NullishValue(msgspec.Struct, frozen=True):
    """A chain ended on a nullish marker - struct variant."""

    value: Any = None

    def to_exception(self) -> NullishValueError:
        """Convert to exception for raise-based code."""
        return NullishValueError(self.value)


class NullishValueError(Exception):
    """A chain ended on a nullish marker - exception variant.

    Raised only by the explicit ``unwrap()`` helpers; short-circuiting
    itself never raises.
    """

    def __init__(self, value: Any = None) -> None:
        self.value = value
        super().__init__(f'Chain value is nullish: {value!r}')

    def to_struct(self) -> NullishValue:
        """Convert to struct for value-based code."""
        return NullishValue(self.value)
