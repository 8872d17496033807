from .extent import INFINITE, UNKNOWN, Extent
from .lazy_seq import InfiniteSequenceError, LazySeq, SequenceLimitError
from .merge import zip_longest_with
from .thunk import CyclicDemandError, Thunk

__all__ = [
    "INFINITE",
    "UNKNOWN",
    "CyclicDemandError",
    "Extent",
    "InfiniteSequenceError",
    "LazySeq",
    "SequenceLimitError",
    "Thunk",
    "zip_longest_with",
]
