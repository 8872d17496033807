from enum import Enum

from typing_extensions import TypeIs


# it stands in for nothing
class Nothing(Enum):
    """
    Padding marker for a side of a merge that has run out.

    A dedicated singleton rather than `None`, so sequences of `None` still
    merge correctly.
    """

    NOTHING = "nothing"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "nothing"


nothing = Nothing.NOTHING

type Maybe[T] = T | Nothing
"""A merge slot: an element, or `nothing` once that side is exhausted."""


def is_nothing(item: object) -> TypeIs[Nothing]:
    return item is nothing
