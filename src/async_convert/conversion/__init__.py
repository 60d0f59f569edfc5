"""
Conversion contracts.
Provides the fallible, possibly-suspending TryFromAsync contract and the
TryIntoAsync call shape derived from it, so a target type implements one
coroutine and callers can use either direction.
"""

from .interfaces import (
    ConflictingConversionError,
    ContractError,
    MissingConversionError,
    TryFromAsync,
    TryIntoAsync,
)
from .adapters import Convertible, conversion_error_type, implements_try_from_async, try_into_async
