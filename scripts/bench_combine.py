import argparse
import itertools

from diagpair import INFINITE, combine
from diagpair.utils.grid import coverage_grid, diagonal_sums, is_exact_cover
from diagpair.utils.tally import Tally
from diagpair.utils.time_this import time_this


def _source(length: int | None) -> Tally[int]:
    # None means unbounded
    if length is None:
        return Tally(itertools.count())
    return Tally(range(length))


def main(left: int | None, right: int | None, take: int):
    left_tally = _source(left)
    right_tally = _source(right)
    s1 = left_tally.seq(INFINITE if left is None else None)
    s2 = right_tally.seq(INFINITE if right is None else None)

    pairs = combine(s1, s2)
    print(f"left={s1.extent} right={s2.extent} product={pairs.extent}")

    with time_this(f"first {take} pairs", {"left": left_tally, "right": right_tally}):
        prefix = pairs.take(take).to_list()

    print(f"produced {len(prefix)} pairs, last {prefix[-1] if prefix else None}")

    sums = diagonal_sums(prefix)
    print(f"deepest diagonal reached: {sums.max() if len(sums) else -1}")
    assert (sums[1:] >= sums[:-1]).all(), "pairs left diagonal order"

    if left is not None and right is not None and len(prefix) == left * right:
        grid = coverage_grid(prefix, (left, right))
        print(f"exact cover of {left}x{right}: {is_exact_cover(grid)}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Time diagonal pairing of two integer sequences"
    )
    parser.add_argument(
        "--left", type=int, default=None, help="Length of the left input (default: unbounded)"
    )
    parser.add_argument(
        "--right", type=int, default=None, help="Length of the right input (default: unbounded)"
    )
    parser.add_argument("--take", type=int, default=10_000, help="Pairs to produce")

    args = parser.parse_args()
    main(args.left, args.right, args.take)
