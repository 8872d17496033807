import numpy as np
import pytest

from diagpair import INFINITE, Extent, LazySeq, MaterializeConfig
from diagpair.utils.grid import coverage_grid, diagonal_sums, is_exact_cover
from diagpair.utils.nothing import is_nothing, nothing
from diagpair.utils.tally import Tally
from diagpair.utils.time_this import time_this


def test_tally_counts_pulls():
    tally = Tally("abc")
    assert tally.extent == Extent.finite(3)

    items = iter(tally)
    next(items)
    next(items)
    assert tally.pulled == 2


def test_tally_extent_of_lazy_source():
    assert Tally(LazySeq.count()).extent == INFINITE
    assert Tally(iter([1])).seq().extent.is_known is False


def test_coverage_grid():
    grid = coverage_grid([(0, 0), (1, 2), (1, 2)], (2, 3))

    assert grid.shape == (2, 3)
    assert grid[1, 2] == 2
    assert grid.sum() == 3
    assert not is_exact_cover(grid)
    assert is_exact_cover(np.ones((2, 2), dtype=np.int64))

    with pytest.raises(ValueError):
        coverage_grid([(2, 0)], (2, 3))


def test_diagonal_sums():
    assert diagonal_sums([(0, 0), (1, 0), (0, 1)]).tolist() == [0, 1, 1]
    assert diagonal_sums([]).tolist() == []


def test_nothing_marker():
    assert is_nothing(nothing)
    assert not is_nothing(None)
    assert not nothing
    assert repr(nothing) == "nothing"


def test_materialize_config():
    assert MaterializeConfig.default() == MaterializeConfig()
    assert MaterializeConfig.cautious(10).limit == 10

    with pytest.raises(ValueError):
        MaterializeConfig(limit=-1)


def test_time_this_reports_tallies(capsys):
    tally = Tally(range(5))

    with time_this("walk", {"source": tally}):
        list(tally)

    out = capsys.readouterr().out
    assert ">>> walk: ..." in out
    assert "source: 5 pulled" in out
