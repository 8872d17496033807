from collections.abc import Callable

from diagpair.lazy.extent import Extent
from diagpair.lazy.lazy_seq import LazySeq, Node
from diagpair.lazy.thunk import Demand
from diagpair.utils.nothing import Maybe, nothing

_EXHAUSTED = Extent.finite(0)


def zip_longest_with[X, Y, Z](
    xs: LazySeq[X], ys: LazySeq[Y], fn: Callable[[Maybe[X], Maybe[Y]], Z]
) -> LazySeq[Z]:
    """
    Length-matching merge: [...X], [...Y] -> [... fn(x, y)]

    Runs until *both* sides are exhausted. Once one side runs out, `nothing`
    is passed in its place and that side is never forced again. `fn` never
    sees `nothing` twice.

    Each output node forces at most one node of each operand, and neither
    operand is measured or collected up front, so an infinite operand on
    either side is fine.
    """
    return _merged(xs, ys, fn)


def _merged[X, Y, Z](
    xs: LazySeq[X] | None,
    ys: LazySeq[Y] | None,
    fn: Callable[[Maybe[X], Maybe[Y]], Z],
) -> LazySeq[Z]:
    # None marks a side already known to be exhausted
    def steps() -> Demand[Node[Z]]:
        x_node = None if xs is None else (yield xs.node)
        y_node = None if ys is None else (yield ys.node)

        if x_node is None and y_node is None:
            return None

        x, xs_rest = (nothing, None) if x_node is None else x_node
        y, ys_rest = (nothing, None) if y_node is None else y_node
        return (fn(x, y), _merged(xs_rest, ys_rest, fn))

    return LazySeq.defer(steps, _extent_of(xs).longest(_extent_of(ys)))


def _extent_of(seq: LazySeq | None) -> Extent:
    return _EXHAUSTED if seq is None else seq.extent
