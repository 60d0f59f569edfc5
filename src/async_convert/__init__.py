"""
Async TryFromAsync/TryIntoAsync conversion contracts.

A target type implements ``TryFromAsync[Source]`` with a coroutine classmethod
``try_from_async`` and an ``Error`` class attribute. The reverse call
``await try_into_async(value, Target)`` is derived from it, behaves the same,
and raises the same error objects.
"""

from .conversion import (
    ConflictingConversionError,
    ContractError,
    Convertible,
    MissingConversionError,
    TryFromAsync,
    TryIntoAsync,
    conversion_error_type,
    implements_try_from_async,
    try_into_async,
)

__all__ = [
    "__version__",
    "TryFromAsync",
    "TryIntoAsync",
    "Convertible",
    "try_into_async",
    "conversion_error_type",
    "implements_try_from_async",
    "ContractError",
    "MissingConversionError",
    "ConflictingConversionError",
]

__version__ = "0.1.0"
