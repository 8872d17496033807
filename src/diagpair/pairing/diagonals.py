from collections.abc import Callable

from diagpair.lazy.extent import INFINITE, UNKNOWN, Extent
from diagpair.lazy.lazy_seq import LazySeq, Node
from diagpair.lazy.merge import zip_longest_with
from diagpair.lazy.thunk import Demand
from diagpair.utils.nothing import Maybe, is_nothing
from diagpair.utils.types import Pair, PairFn

type Diagonal[A, B] = LazySeq[Pair[A, B]]
"""All pairs (a_i, b_j) with one fixed i + j, in increasing j."""


def combine[A, B](s1: LazySeq[A], s2: LazySeq[B]) -> LazySeq[Pair[A, B]]:
    """
    Every pair of an element of `s1` with an element of `s2`, exactly once,
    in diagonal order: all pairs with i + j = k before any with i + j = k + 1,
    and within a diagonal by increasing j.

        combine([0, 1], [0, 1, 2])
        -> (0,0) (1,0) (0,1) (1,1) (0,2) (1,2)

    Either input may be infinite. The result is infinite when both inputs
    are, or when one is and the other is non-empty; `extent` of the result
    reports this whenever the inputs' extents do.
    """
    return LazySeq.flatten(diagonals(s1, s2), s1.extent * s2.extent)


def combine_with[A, B, C](s1: LazySeq[A], s2: LazySeq[B], fn: PairFn[A, B, C]) -> LazySeq[C]:
    """`combine`, building each output with `fn(a, b)` rather than a tuple."""
    return combine(s1, s2).map(lambda pair: fn(*pair))


def diagonals[A, B](s1: LazySeq[A], s2: LazySeq[B]) -> LazySeq[Diagonal[A, B]]:
    """
    The diagonals of s1 x s2, one finite sequence of pairs per diagonal.

    With a, as = s1 and b, bs = s2:
        diagonal 0     = [(a, b)]
        diagonal k + 1 = (as[k], b) prepended to diagonal k of diagonals(s1, bs)

    The two halves of diagonal k + 1 run out at different k when the inputs
    have different lengths, so they are joined with a merge that pads
    instead of truncating. Every diagonal produced is non-empty.
    """

    def steps() -> Demand[Node[Diagonal[A, B]]]:
        # s1 first: an empty s1 must not pull anything from s2
        first = yield s1.node
        if first is None:
            return None

        second = yield s2.node
        if second is None:
            return None

        a, rest1 = first
        b, rest2 = second

        def grow(x: Maybe[A], diagonal: Maybe[Diagonal[A, B]]) -> Diagonal[A, B]:
            if is_nothing(diagonal):
                return LazySeq.cons((x, b), LazySeq.empty())
            if is_nothing(x):
                return diagonal
            return LazySeq.cons((x, b), diagonal)

        origin: Diagonal[A, B] = LazySeq.cons((a, b), LazySeq.empty())
        later = zip_longest_with(rest1, diagonals(s1, rest2), grow)
        return (origin, later)

    return LazySeq.defer(steps, diagonal_count(s1.extent, s2.extent))


def diagonal_count(e1: Extent, e2: Extent) -> Extent:
    """How many diagonals the product of two sequences of these extents has."""
    if e1.is_empty or e2.is_empty:
        return Extent.finite(0)
    if e1.size is not None and e2.size is not None:
        return Extent.finite(e1.size + e2.size - 1)
    if (e1.infinite and e2.is_known) or (e2.infinite and e1.is_known):
        return INFINITE
    return UNKNOWN
