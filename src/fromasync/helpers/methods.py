from __future__ import annotations

from collections.abc import Callable, Coroutine, MutableSequence
from typing import Any

from fromasync.helpers.materialize import from_async
from fromasync.types.missing import MISSING, Missing

__all__ = ("fromasyncmethod",)


class fromasyncmethod[Container: MutableSequence[Any]]:
    """
    Descriptor exposing `from_async` which collects into the owning class.

    - When accessed on the class, that class is used as the result factory.
    - When accessed on an instance, the instance type is used as the result factory.

    Subclasses inherit the descriptor and collect into their own type:

    >>> from fromasync import fromasyncmethod
    >>>
    >>> class Buffer(list[int]):
    ...     from_async = fromasyncmethod()
    ...
    ...     def __init__(self, length: int = 0) -> None:
    ...         super().__init__([0] * length)
    >>>
    >>> class Strict(Buffer): ...
    >>>
    >>> buffer = await Buffer.from_async(range(3))  # Buffer([0, 1, 2])
    >>> strict = await Strict.from_async(range(3))  # Strict([0, 1, 2])

    The class has to accept no arguments when collecting iterables and
    a single length argument when collecting indexable sources, a plain
    `list` subclass without such `__init__` fails for indexable sources.
    """

    __slots__ = ("_name",)

    def __init__(self) -> None:
        self._name: str | None = None

    def __set_name__(
        self,
        owner: type[Any],
        name: str,
    ) -> None:
        self._name = name

    def __get__(
        self,
        obj: Container | None,
        owner: type[Container] | None = None,
    ) -> Callable[..., Coroutine[Any, Any, Container]]:
        factory: type[Container]
        if obj is not None:
            factory = type(obj)

        elif owner is not None:
            factory = owner

        else:
            name: str = self._name if self._name is not None else "<unknown>"
            raise AttributeError(f"Unbound fromasyncmethod access to '{name}' without owner class")

        async def bound(
            source: Any,
            transform: Callable[..., Any] | None = None,
            context: Any | Missing = MISSING,
            /,
        ) -> Container:
            return await from_async(
                source,
                transform,
                context,
                factory=factory,
            )

        bound.__name__ = self._name if self._name is not None else "from_async"
        bound.__qualname__ = f"{factory.__qualname__}.{bound.__name__}"
        bound.__doc__ = from_async.__doc__
        bound.__wrapped__ = from_async  # type: ignore[attr-defined]

        return bound
