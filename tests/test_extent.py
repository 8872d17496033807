import pytest

from diagpair.lazy.extent import INFINITE, UNKNOWN, Extent


def test_product_rules():
    assert Extent.finite(2) * Extent.finite(3) == Extent.finite(6)
    assert INFINITE * Extent.finite(3) == INFINITE
    assert Extent.finite(3) * INFINITE == INFINITE
    assert INFINITE * INFINITE == INFINITE

    # anything times zero is zero, even unknowns
    assert INFINITE * Extent.finite(0) == Extent.finite(0)
    assert UNKNOWN * Extent.finite(0) == Extent.finite(0)

    # unknown might be empty
    assert INFINITE * UNKNOWN == UNKNOWN
    assert Extent.finite(2) * UNKNOWN == UNKNOWN


def test_longest_and_shortest():
    assert Extent.finite(2).longest(Extent.finite(5)) == Extent.finite(5)
    assert Extent.finite(2).longest(INFINITE) == INFINITE
    assert UNKNOWN.longest(INFINITE) == INFINITE
    assert UNKNOWN.longest(Extent.finite(1)) == UNKNOWN

    assert Extent.finite(4).shortest(INFINITE) == Extent.finite(4)
    assert Extent.finite(4).shortest(Extent.finite(2)) == Extent.finite(2)
    assert Extent.finite(0).shortest(UNKNOWN) == Extent.finite(0)
    assert Extent.finite(4).shortest(UNKNOWN) == UNKNOWN


def test_after_and_add():
    assert Extent.finite(3).after() == Extent.finite(2)
    assert Extent.finite(3).after(5) == Extent.finite(0)
    assert INFINITE.after() == INFINITE
    assert UNKNOWN.after() == UNKNOWN
    assert Extent.finite(3) + 1 == Extent.finite(4)
    assert INFINITE + 1 == INFINITE


def test_flags():
    assert Extent.finite(0).is_empty
    assert not UNKNOWN.is_empty
    assert not UNKNOWN.is_known
    assert INFINITE.is_known
    assert not INFINITE.is_finite
    assert Extent.finite(5).is_finite


def test_invalid_extents():
    with pytest.raises(ValueError):
        Extent(size=-1)
    with pytest.raises(ValueError):
        Extent(size=3, infinite=True)


def test_repr():
    assert repr(Extent.finite(3)) == "Extent(3)"
    assert repr(INFINITE) == "Extent(inf)"
    assert repr(UNKNOWN) == "Extent(?)"
