from collections.abc import Callable


def lazy[T](cls: T) -> T:
    """
    This decorator is only an annotation -- it provides no functionality.

    Marks a class as "lazy": constructing it does no work, and nothing it
    describes is computed until a consumer pulls on it.
    """
    return cls


type Pair[A, B] = tuple[A, B]

type PairFn[A, B, C] = Callable[[A, B], C]
"""Builds one output element from the two components of a pair."""

IntInt = tuple[int, int]
