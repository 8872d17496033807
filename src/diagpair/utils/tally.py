from collections.abc import Iterable, Iterator, Sized

from diagpair.lazy.extent import UNKNOWN, Extent
from diagpair.lazy.lazy_seq import LazySeq


class Tally[T]:
    """
    Instrumented iterable: counts how many elements have been pulled through it.

    Used to check how much of an input a lazy computation actually forced.
    """

    def __init__(self, source: Iterable[T]):
        self._source = source
        self.pulled = 0

    def __iter__(self) -> Iterator[T]:
        for item in self._source:
            self.pulled += 1
            yield item

    @property
    def extent(self) -> Extent:
        """The source's extent, as far as it is visible without iterating."""
        if isinstance(self._source, LazySeq):
            return self._source.extent
        if isinstance(self._source, Sized):
            return Extent.finite(len(self._source))
        return UNKNOWN

    def seq(self, extent: Extent | None = None) -> LazySeq[T]:
        """A lazy sequence drawing from this tally, one pull per node forced."""
        return LazySeq.from_iterable(iter(self), self.extent if extent is None else extent)
