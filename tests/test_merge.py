import itertools

from diagpair import INFINITE, Extent, LazySeq, zip_longest_with
from diagpair.utils.nothing import nothing
from diagpair.utils.tally import Tally


def _pair(x, y):
    return (x, y)


def _merge(xs, ys):
    return zip_longest_with(LazySeq.from_iterable(xs), LazySeq.from_iterable(ys), _pair)


def test_equal_lengths():
    assert _merge([1, 2], ["a", "b"]).to_list() == [(1, "a"), (2, "b")]


def test_pads_the_shorter_side():
    assert _merge([1, 2, 3], ["a"]).to_list() == [(1, "a"), (2, nothing), (3, nothing)]
    assert _merge([1], ["a", "b"]).to_list() == [(1, "a"), (nothing, "b")]


def test_both_empty():
    assert _merge([], []).to_list() == []


def test_none_is_an_element_not_padding():
    assert _merge([None, None], [0]).to_list() == [(None, 0), (None, nothing)]


def test_infinite_with_finite():
    merged = zip_longest_with(LazySeq.count(), LazySeq.from_iterable("ab"), _pair)

    assert merged.extent == INFINITE
    assert merged.take(4).to_list() == [(0, "a"), (1, "b"), (2, nothing), (3, nothing)]

    merged = zip_longest_with(LazySeq.from_iterable("ab"), LazySeq.count(), _pair)
    assert merged.take(3).to_list() == [("a", 0), ("b", 1), (nothing, 2)]


def test_forces_one_node_per_side_per_output():
    left = Tally(itertools.count())
    right = Tally(itertools.count())
    merged = zip_longest_with(left.seq(INFINITE), right.seq(INFINITE), _pair)

    assert left.pulled == 0
    assert merged.take(3).to_list() == [(0, 0), (1, 1), (2, 2)]
    assert left.pulled == 3
    assert right.pulled == 3


def test_fn_never_sees_nothing_on_both_sides():
    seen = []

    def record(x, y):
        seen.append((x, y))
        return x if y is nothing else y

    merged = zip_longest_with(
        LazySeq.from_iterable([1, 2, 3]), LazySeq.from_iterable([10]), record
    )
    assert merged.to_list() == [10, 2, 3]
    assert (nothing, nothing) not in seen


def test_extent():
    assert _merge([1, 2, 3], ["a"]).extent == Extent.finite(3)
    assert _merge([1, 2, 3], ["a"]).tail().extent == Extent.finite(2)
