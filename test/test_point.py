import pytest

from ecelgamal import Point, INFINITY, PointAtInfinity


def test_equality():
    assert Point(7, 455) == Point(7, 455)
    assert Point(7, 455) != Point(7, 428)
    assert len({Point(7, 455), Point(7, 455), Point(7, 428)}) == 2


def test_infinity_is_not_a_coordinate_pair():
    assert INFINITY == PointAtInfinity()
    assert INFINITY != Point(0, 0)
    assert Point(0, 0) != INFINITY
    assert INFINITY.inf
    assert not Point(0, 0).inf
    assert INFINITY.x is None and INFINITY.y is None


def test_immutable():
    P = Point(1, 2)
    with pytest.raises(AttributeError):
        P.x = 3
    x, y = P
    assert (x, y) == (1, 2)


def test_coordinates_checked():
    with pytest.raises(TypeError):
        Point(1.0, 2)
    with pytest.raises(ValueError):
        Point(-1, 2)


def test_str():
    assert str(Point(7, 455)) == "(7, 455)"
    assert str(INFINITY) == "Point @ Infinity"
