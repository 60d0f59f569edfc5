from typing import Any, ClassVar, Protocol, TypeVar

SourceT = TypeVar("SourceT", contravariant=True)
TargetT = TypeVar("TargetT")


class ContractError(TypeError):
    """A conversion contract was declared or used incorrectly."""


class MissingConversionError(ContractError):
    pass


class ConflictingConversionError(ContractError):
    pass


class TryFromAsync(Protocol[SourceT]):
    """Fallible conversion that may suspend before producing a value.

    Implemented by the target class. It is the reciprocal of
    :class:`TryIntoAsync`, which every implementation gets for free.

    This is useful when a conversion may trivially succeed but may also need
    special handling, and has to await I/O while doing so. For example a body
    type can declare ``TryFromAsync[Request]`` to consume the request bytes
    and build itself, failing when the payload is unusable.
    """

    Error: ClassVar[type[BaseException]]
    """The type raised in the event of a conversion error."""

    @classmethod
    async def try_from_async(cls: type[TargetT], value: SourceT) -> TargetT:
        """Perform the conversion, consuming ``value``."""
        ...


class TryIntoAsync:
    """An attempted conversion that consumes ``self``.

    Library authors should not implement ``try_into_async`` themselves but
    implement :class:`TryFromAsync` on the target instead. Mixing this class
    in gives the reverse-named call shape ``await value.try_into_async(Target)``
    derived from that implementation.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "try_into_async" in cls.__dict__:
            raise ConflictingConversionError(
                f"{cls.__qualname__} defines try_into_async; implement "
                "TryFromAsync on the target type instead"
            )

    async def try_into_async(self, target: type[TargetT]) -> TargetT:
        from .adapters import try_into_async

        return await try_into_async(self, target)
