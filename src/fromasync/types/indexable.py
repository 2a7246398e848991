from typing import Protocol

__all__ = ("Indexable",)


class Indexable[Element](Protocol):
    """
    Passive collection accessed by position.

    Objects of this shape expose their size through `len()` and their
    elements through integer subscription in range `0..len()-1`.
    They do not implement any iteration protocol, otherwise they would
    be consumed as iterables instead.
    """

    def __len__(self) -> int: ...

    def __getitem__(
        self,
        index: int,
        /,
    ) -> Element: ...
