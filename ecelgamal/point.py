#!/usr/bin/env python3

"""
points of a curve in affine coordinates and the point at infinity
"""


class Point(object):

    __slots__ = ("x", "y")

    inf = False

    def __init__(self, x, y):
        if not isinstance(x, int) or not isinstance(y, int):
            raise TypeError("ec point coordinate must be int")
        if x < 0 or y < 0:
            raise ValueError("ec point coordinate must be non-negative")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        return iter((self.x, self.y))

    def __str__(self):
        return "(" + str(self.x) + ", " + str(self.y) + ")"

    def __repr__(self):
        return "Point(" + str(self.x) + ", " + str(self.y) + ")"


class PointAtInfinity(object):
    """identity of the group law, has no coordinates"""

    __slots__ = ()

    inf = True
    x = None
    y = None

    def __eq__(self, other):
        return isinstance(other, PointAtInfinity)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(PointAtInfinity)

    def __str__(self):
        return "Point @ Infinity"

    def __repr__(self):
        return "INFINITY"


INFINITY = PointAtInfinity()
