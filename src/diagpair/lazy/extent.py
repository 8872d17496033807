from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class Extent:
    """
    What is known, without forcing anything, about how many elements a
    sequence still has to produce.

    Exactly one of three shapes:
      - finite:   `size` is the exact remaining count
      - infinite: `infinite` is set, the sequence never exhausts
      - unknown:  neither, only forcing to the end would tell
    """

    size: int | None = None
    infinite: bool = False

    def __post_init__(self):
        if self.infinite and self.size is not None:
            raise ValueError("an infinite extent has no size")
        if self.size is not None and self.size < 0:
            raise ValueError(f"extent size must be non-negative, got {self.size}")

    @classmethod
    def finite(cls, size: int) -> "Extent":
        return cls(size=size)

    @property
    def is_finite(self) -> bool:
        return self.size is not None

    @property
    def is_known(self) -> bool:
        return self.infinite or self.size is not None

    @property
    def is_empty(self) -> bool:
        """Known to hold nothing. False for unknown extents."""
        return self.size == 0

    def after(self, count: int = 1) -> "Extent":
        """The extent left once `count` elements have been produced."""
        if self.size is None:
            return self
        return Extent.finite(max(0, self.size - count))

    def __add__(self, count: int) -> "Extent":
        if self.size is None:
            return self
        return Extent.finite(self.size + count)

    def __mul__(self, other: "Extent") -> "Extent":
        """
        Extent of the cross product.
        0 * anything = 0, inf * k = inf (k >= 1), unknown otherwise.
        """
        if self.is_empty or other.is_empty:
            return Extent.finite(0)
        if self.size is not None and other.size is not None:
            return Extent.finite(self.size * other.size)
        if self.infinite and other.is_known:
            return INFINITE
        if other.infinite and self.is_known:
            return INFINITE
        return UNKNOWN

    def longest(self, other: "Extent") -> "Extent":
        """Extent of a merge that runs until both operands are exhausted."""
        if self.infinite or other.infinite:
            return INFINITE
        if self.size is not None and other.size is not None:
            return Extent.finite(max(self.size, other.size))
        return UNKNOWN

    def shortest(self, other: "Extent") -> "Extent":
        """Extent of a merge that stops as soon as either operand is exhausted."""
        if self.is_empty or other.is_empty:
            return Extent.finite(0)
        if self.infinite:
            return other
        if other.infinite:
            return self
        if self.size is not None and other.size is not None:
            return Extent.finite(min(self.size, other.size))
        return UNKNOWN

    def __repr__(self) -> str:
        if self.infinite:
            return "Extent(inf)"
        if self.size is None:
            return "Extent(?)"
        return f"Extent({self.size})"


INFINITE = Extent(infinite=True)
UNKNOWN = Extent()
