from diagpair.config import MaterializeConfig
from diagpair.lazy import (
    INFINITE,
    UNKNOWN,
    CyclicDemandError,
    Extent,
    InfiniteSequenceError,
    LazySeq,
    SequenceLimitError,
    Thunk,
    zip_longest_with,
)
from diagpair.pairing import combine, combine_with, diagonals

__all__ = [
    "INFINITE",
    "UNKNOWN",
    "CyclicDemandError",
    "Extent",
    "InfiniteSequenceError",
    "LazySeq",
    "MaterializeConfig",
    "SequenceLimitError",
    "Thunk",
    "combine",
    "combine_with",
    "diagonals",
    "zip_longest_with",
]
