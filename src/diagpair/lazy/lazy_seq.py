from collections.abc import Callable, Iterable, Iterator, Sized
from logging import warning
from typing import final

from diagpair.config import MaterializeConfig
from diagpair.lazy.extent import INFINITE, UNKNOWN, Extent
from diagpair.lazy.thunk import Demand, Thunk
from diagpair.utils.types import lazy

type Node[T] = tuple[T, LazySeq[T]] | None
"""One step of a sequence: `(head, tail)`, or None once exhausted."""

_REPR_PREVIEW = 8


class InfiniteSequenceError(ValueError):
    """Full materialisation was asked of a sequence known never to end."""


class SequenceLimitError(ValueError):
    """A sequence held more elements than `MaterializeConfig.limit` allows."""


@lazy
@final
class LazySeq[T]:
    """
    A persistent, pull-based cons list.

    Each sequence is a memoised `Thunk` that resolves to a `Node`. Forcing a
    node pulls exactly one element from whatever produces the sequence; the
    result is kept, so the same handle can be walked any number of times even
    when the producer is a one-shot iterator. Nothing is pulled until a
    consumer asks.

    `extent` records what is known about the length without forcing, and is
    what `to_list` consults before it commits to walking to the end.
    """

    __slots__ = ("node", "extent")

    def __init__(self, node: Thunk[Node[T]], extent: Extent = UNKNOWN):
        self.node: Thunk[Node[T]] = node
        self.extent: Extent = extent

    # --- construction ---

    @staticmethod
    def empty() -> "LazySeq[T]":
        return LazySeq(Thunk.ready(None), Extent.finite(0))

    @staticmethod
    def cons(head: T, tail: "LazySeq[T]") -> "LazySeq[T]":
        return LazySeq(Thunk.ready((head, tail)), tail.extent + 1)

    @staticmethod
    def defer(steps: Callable[[], Demand[Node[T]]], extent: Extent = UNKNOWN) -> "LazySeq[T]":
        """
        A sequence whose first node is computed by a demanding generator (see
        `Thunk`). Combinators build on this so that forcing them never
        recurses on the Python stack.
        """
        return LazySeq(Thunk.demanding(steps), extent)

    @staticmethod
    def from_iterable(items: Iterable[T], extent: Extent | None = None) -> "LazySeq[T]":
        """
        Wrap any iterable; one element is pulled per node forced.

        Unless `extent` is given, sized collections get a finite extent and
        anything else an unknown one. Pass `INFINITE` for a generator known
        not to end.
        """
        if isinstance(items, LazySeq):
            return items

        if extent is None:
            extent = Extent.finite(len(items)) if isinstance(items, Sized) else UNKNOWN
        return _pulled(iter(items), extent)

    @staticmethod
    def iterate(seed: T, fn: Callable[[T], T]) -> "LazySeq[T]":
        """seed, fn(seed), fn(fn(seed)), ... without end"""

        def successor(previous: T) -> LazySeq[T]:
            def next_node() -> Node[T]:
                value = fn(previous)
                return (value, successor(value))

            return LazySeq(Thunk(next_node), INFINITE)

        return LazySeq.cons(seed, successor(seed))

    @staticmethod
    def count(start: int = 0, step: int = 1) -> "LazySeq[int]":
        return LazySeq.iterate(start, lambda n: n + step)

    @staticmethod
    def repeat(value: T) -> "LazySeq[T]":
        # a single node whose tail is itself
        seq: LazySeq[T] = LazySeq(Thunk.ready(None), INFINITE)
        seq.node = Thunk.ready((value, seq))
        return seq

    @staticmethod
    def unfold[S](seed: S, fn: Callable[[S], tuple[T, S] | None]) -> "LazySeq[T]":
        """
        Corecursive construction: `fn(state)` gives the next element and the
        next state, or None to stop.
        """

        def next_node() -> Node[T]:
            step = fn(seed)
            if step is None:
                return None
            value, state = step
            return (value, LazySeq.unfold(state, fn))

        return LazySeq(Thunk(next_node), UNKNOWN)

    @staticmethod
    def flatten(groups: "LazySeq[LazySeq[T]]", extent: Extent = UNKNOWN) -> "LazySeq[T]":
        """
        Concatenate a (possibly infinite) sequence of sequences, lazily.
        The caller supplies the extent of the result when it knows it.
        """
        return _concat(groups, LazySeq.empty(), extent)

    # --- consumption ---

    def is_exhausted(self) -> bool:
        return self.node.force() is None

    def head(self) -> T:
        node = self.node.force()
        if node is None:
            raise IndexError("head of an exhausted sequence")
        return node[0]

    def tail(self) -> "LazySeq[T]":
        node = self.node.force()
        if node is None:
            raise IndexError("tail of an exhausted sequence")
        return node[1]

    def __iter__(self) -> Iterator[T]:
        return self._iter(self)

    # Static so the generator does not keep `self` (and so every node
    # already walked past) alive.
    @staticmethod
    def _iter(seq: "LazySeq[T]") -> Iterator[T]:
        while True:
            node = seq.node.force()
            if node is None:
                return
            item, seq = node
            yield item

    def take(self, n: int) -> "LazySeq[T]":
        """The first `n` elements (fewer if the sequence ends first), still lazy."""
        if n < 0:
            raise ValueError(f"cannot take a negative number of elements ({n})")
        return _taken(self, n)

    def map[U](self, fn: Callable[[T], U]) -> "LazySeq[U]":
        source = self

        def steps() -> Demand[Node[U]]:
            node = yield source.node
            if node is None:
                return None
            item, rest = node
            return (fn(item), rest.map(fn))

        return LazySeq.defer(steps, self.extent)

    def to_list(self, config: MaterializeConfig | None = None) -> list[T]:
        """
        Walk to the end and collect everything.

        Raises:
            InfiniteSequenceError: the extent is infinite (checked before
                anything is forced).
            SequenceLimitError: more than `config.limit` elements turned up.
        """
        config = config or MaterializeConfig.default()

        if self.extent.infinite and config.refuse_infinite:
            raise InfiniteSequenceError(
                "refusing to materialise an infinite sequence; take(n) first"
            )

        if not self.extent.is_known and config.warn_unknown:
            warning(
                "materialising a sequence of unknown extent; "
                "this will not return if the sequence is infinite"
            )

        items: list[T] = []
        seq = self

        while (node := seq.node.force()) is not None:
            if config.limit is not None and len(items) == config.limit:
                raise SequenceLimitError(
                    f"sequence holds more than the {config.limit} elements allowed"
                )
            item, seq = node
            items.append(item)

        return items

    def __repr__(self) -> str:
        # only what has already been forced; repr must not pull anything
        shown: list[str] = []
        seq = self

        while len(shown) < _REPR_PREVIEW and seq.node.is_ready:
            node = seq.node.force()
            if node is None:
                return f"LazySeq([{', '.join(shown)}])"
            shown.append(repr(node[0]))
            seq = node[1]

        return f"LazySeq([{', '.join([*shown, '...'])}], extent={self.extent!r})"


def _pulled[T](iterator: Iterator[T], extent: Extent) -> LazySeq[T]:
    def next_node() -> Node[T]:
        try:
            item = next(iterator)
        except StopIteration:
            return None
        return (item, _pulled(iterator, extent.after()))

    return LazySeq(Thunk(next_node), extent)


def _taken[T](seq: LazySeq[T], n: int) -> LazySeq[T]:
    if n == 0:
        return LazySeq.empty()

    def steps() -> Demand[Node[T]]:
        node = yield seq.node
        if node is None:
            return None
        item, rest = node
        return (item, _taken(rest, n - 1))

    return LazySeq.defer(steps, Extent.finite(n).shortest(seq.extent))


def _concat[T](groups: LazySeq[LazySeq[T]], current: LazySeq[T], extent: Extent) -> LazySeq[T]:
    def steps() -> Demand[Node[T]]:
        inner, outer = current, groups
        while True:
            node = yield inner.node
            if node is not None:
                item, rest = node
                return (item, _concat(outer, rest, extent.after()))

            group = yield outer.node
            if group is None:
                return None
            inner, outer = group

    return LazySeq.defer(steps, extent)
