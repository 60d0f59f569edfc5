import logging
from typing import Any, Generic, TypeVar

from .interfaces import MissingConversionError, TryFromAsync

logger = logging.getLogger(__name__)

SourceT = TypeVar("SourceT")
TargetT = TypeVar("TargetT")


def implements_try_from_async(target: Any) -> bool:
    """Return True when ``target`` provides its own ``try_from_async``.

    Any callable returning an awaitable qualifies; awaiting the result decides.
    """
    fn = getattr(target, "try_from_async", None)
    if fn is None or not callable(fn):
        return False
    # The protocol's placeholder body returns None; it is not an implementation.
    return getattr(fn, "__func__", fn) is not TryFromAsync.__dict__["try_from_async"].__func__


def conversion_error_type(target: type[Any]) -> type[BaseException]:
    """Error type raised by the reverse conversion into ``target``.

    It is exactly the error type of the forward implementation.
    """
    if not implements_try_from_async(target):
        raise MissingConversionError(f"{_name(target)} does not implement TryFromAsync")
    error = getattr(target, "Error", None)
    if not (isinstance(error, type) and issubclass(error, BaseException)):
        raise MissingConversionError(f"{_name(target)}.Error must be an exception class, got {error!r}")
    return error


async def try_into_async(value: Any, target: type[TargetT]) -> TargetT:
    """Convert ``value`` into ``target`` through ``target.try_from_async``.

    Whatever the forward conversion returns or raises is passed through
    unchanged, and it suspends exactly where the forward conversion does.
    """
    if not implements_try_from_async(target):
        raise MissingConversionError(
            f"{_name(target)} does not implement TryFromAsync for {type(value).__qualname__}"
        )
    logger.debug("converting %s into %s", type(value).__qualname__, _name(target))
    return await target.try_from_async(value)  # type: ignore[attr-defined]


class Convertible(Generic[SourceT]):
    """Reverse-named call shape for values that cannot mix in TryIntoAsync.

    ``await Convertible(5).try_into_async(GreaterThanZero)`` is the same call
    as ``await GreaterThanZero.try_from_async(5)``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: SourceT) -> None:
        self._value = value

    @property
    def value(self) -> SourceT:
        return self._value

    async def try_into_async(self, target: type[TargetT]) -> TargetT:
        return await try_into_async(self._value, target)

    def __repr__(self) -> str:
        return f"Convertible({self._value!r})"


def _name(target: Any) -> str:
    return getattr(target, "__qualname__", repr(target))
