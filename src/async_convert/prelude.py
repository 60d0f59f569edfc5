"""Shared prelude: ``from async_convert.prelude import *`` brings both call shapes into scope."""

from .conversion import Convertible, TryFromAsync, TryIntoAsync, try_into_async

__all__ = ["TryFromAsync", "TryIntoAsync", "Convertible", "try_into_async"]
