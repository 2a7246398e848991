from collections.abc import AsyncIterable, Awaitable, Callable, Iterable, MutableSequence
from functools import partial
from inspect import isabstract, isawaitable
from logging import Logger, getLogger
from typing import Any, Final, Literal, cast, overload

from fromasync.types.indexable import Indexable
from fromasync.types.missing import MISSING, Missing

__all__ = (
    "MAX_SAFE_INTEGER",
    "SourceTooLongError",
    "from_async",
)

MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

_logger: Logger = getLogger(__name__)

type SourceShape = Literal["asynchronous", "synchronous", "indexable"]


class SourceTooLongError(TypeError):
    """
    Exception raised when a source yields more elements than MAX_SAFE_INTEGER.

    The limit matches the largest integer which can be represented exactly
    in double precision, it is checked for every element before storing it.
    """

    def __init__(self) -> None:
        super().__init__("Input is too long and exceeded MAX_SAFE_INTEGER times.")


@overload
async def from_async[Element](
    source: AsyncIterable[Element],
    /,
) -> list[Element]: ...


@overload
async def from_async[Element](
    source: Iterable[Awaitable[Element] | Element] | Indexable[Awaitable[Element] | Element],
    /,
) -> list[Element]: ...


@overload
async def from_async[Element, Result](
    source: AsyncIterable[Element],
    transform: Callable[[Element, int], Awaitable[Result] | Result],
    /,
) -> list[Result]: ...


@overload
async def from_async[Element, Result](
    source: Iterable[Awaitable[Element] | Element] | Indexable[Awaitable[Element] | Element],
    transform: Callable[[Element, int], Awaitable[Result] | Result],
    /,
) -> list[Result]: ...


@overload
async def from_async[Element, Context, Result](
    source: AsyncIterable[Element],
    transform: Callable[[Context, Element, int], Awaitable[Result] | Result],
    context: Context,
    /,
) -> list[Result]: ...


@overload
async def from_async[Element, Context, Result](
    source: Iterable[Awaitable[Element] | Element] | Indexable[Awaitable[Element] | Element],
    transform: Callable[[Context, Element, int], Awaitable[Result] | Result],
    context: Context,
    /,
) -> list[Result]: ...


@overload
async def from_async[Container: MutableSequence[Any]](
    source: AsyncIterable[Any] | Iterable[Any] | Indexable[Any],
    transform: Callable[..., Any] | None = None,
    context: Any | Missing = MISSING,
    /,
    *,
    factory: type[Container],
) -> Container: ...


async def from_async(
    source: AsyncIterable[Any] | Iterable[Any] | Indexable[Any],
    transform: Callable[..., Any] | None = None,
    context: Any | Missing = MISSING,
    /,
    *,
    factory: type[MutableSequence[Any]] | None = None,
) -> MutableSequence[Any]:
    """
    Collect elements of a source into a new list awaiting them when needed.

    The source is classified once, in this order:
    - asynchronous iterable (`__aiter__`): yielded values are used as they are,
      awaitable values are not awaited.
    - synchronous iterable (`__iter__`): each awaitable value is awaited before use.
    - indexable (`__len__` and `__getitem__`): elements `0..len()-1` are read
      and each awaitable element is awaited before use.

    Elements are processed strictly one after another, the next element is
    requested only after the previous one was stored.

    Parameters
    ----------
    source : AsyncIterable[Any] | Iterable[Any] | Indexable[Any]
        Finite source of elements.
    transform : Callable[..., Any] | None
        Function called with each element and its index. Awaitable results are
        awaited before storing. Elements are stored unchanged when not provided.
    context : Any | Missing
        Value passed to the transform as its first argument, before the element.
        Nothing is passed in its place when not provided.
    factory : type[MutableSequence[Any]] | None
        Class of the result container. It is called without arguments for
        iterable sources and with the source length for indexable sources.
        A plain list is used when the factory is not a concrete class.

    Returns
    -------
    MutableSequence[Any]
        Container holding exactly the collected elements in the source order.

    Raises
    ------
    SourceTooLongError
        When the source produced more than MAX_SAFE_INTEGER elements.
    Exception
        Any error raised while iterating, accessing, awaiting, transforming
        elements or creating the container, propagated unchanged.
    """
    shape: SourceShape = _source_shape(source)
    mapping: Callable[[Any, int], Any] | None
    if transform is None:
        mapping = None

    elif context is MISSING:
        mapping = transform

    else:
        mapping = partial(transform, context)

    result: MutableSequence[Any]
    value: Any
    index: int = 0
    match shape:
        case "asynchronous":
            if factory is not None and _is_constructor(factory):
                result = factory()

            else:
                result = []

            _logger.debug(
                "Collecting %s source into %s",
                shape,
                type(result).__name__,
            )

            async for element in cast(AsyncIterable[Any], source):
                _check_index(index)
                if mapping is None:
                    _store(result, index, element)

                else:
                    _store(result, index, await _resolved(mapping(element, index)))

                index += 1

        case "synchronous":
            if factory is not None and _is_constructor(factory):
                result = factory()

            else:
                result = []

            _logger.debug(
                "Collecting %s source into %s",
                shape,
                type(result).__name__,
            )

            for element in cast(Iterable[Any], source):
                _check_index(index)
                value = await _resolved(element)
                if mapping is None:
                    _store(result, index, value)

                else:
                    _store(result, index, await _resolved(mapping(value, index)))

                index += 1

        case "indexable":
            indexable: Indexable[Any] = cast(Indexable[Any], source)
            length: int = len(indexable)
            if factory is not None and _is_constructor(factory):
                result = factory(length)  # pyright: ignore[reportCallIssue]

            else:
                result = [None] * length

            _logger.debug(
                "Collecting %s source of length %d into %s",
                shape,
                length,
                type(result).__name__,
            )

            while index < length:
                _check_index(index)
                value = await _resolved(indexable[index])
                if mapping is None:
                    _store(result, index, value)

                else:
                    _store(result, index, await _resolved(mapping(value, index)))

                index += 1

    if len(result) > index:
        del result[index:]

    _logger.debug("Collected %d elements", index)
    return result


def _source_shape(
    source: Any,
    /,
) -> SourceShape:
    if isinstance(source, AsyncIterable):
        return "asynchronous"

    elif isinstance(source, Iterable):
        return "synchronous"

    else:
        return "indexable"


def _is_constructor(
    candidate: Any,
    /,
) -> bool:
    # only classes can be instantiated, no user code runs while checking
    return isinstance(candidate, type) and not isabstract(candidate)


def _check_index(
    index: int,
    /,
) -> None:
    if index > MAX_SAFE_INTEGER:
        raise SourceTooLongError()


async def _resolved(
    value: Any,
    /,
) -> Any:
    if isawaitable(value):
        return await value

    else:
        return value


def _store(
    container: MutableSequence[Any],
    index: int,
    value: Any,
    /,
) -> None:
    # containers may be preallocated, slots are filled in order
    if index < len(container):
        container[index] = value

    else:
        container.append(value)
