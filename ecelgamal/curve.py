#!/usr/bin/env python3

"""
elliptic curve y^2 = x^3 + a * x + b (mod p) with a generator point G
group law, scalar multiplication, points from x, byte <-> point code table,
ElGamal encryption of byte strings and Diffie-Hellman
"""

import logging
from threading import Lock

from .errors import CodeTableError, NotOnCurveError, UnmappableByteError
from .modular import mod_inv, sqrt_mod_p
from .order import KnownOrder, NaiveOrder
from .point import INFINITY, Point, PointAtInfinity
from .sampler import random_scalar

l = logging.getLogger(__name__)

TABLE_SIZE = 256


class Curve(object):

    def __init__(self, a, b, p, G, order=None):
        for name, value in (("a", a), ("b", b), ("p", p)):
            if not isinstance(value, int):
                raise TypeError(name + " must be an int")
        if p < 3:
            raise ValueError("p must be an odd prime")
        if not isinstance(G, Point):
            raise TypeError("generator must be a Point")
        self.a = a % p
        self.b = b % p
        self.p = p
        self.G = G
        if not self.is_on_curve(G):
            raise NotOnCurveError("generator " + str(G) + " is not on the curve")
        if order is None:
            order = NaiveOrder()
        elif isinstance(order, int):
            order = KnownOrder(order)
        self.order_strategy = order
        self._generator_order = None
        self._table = None
        self._inverse_table = None
        self._lock = Lock()

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return False
        return self.p == other.p and \
               self.a == other.a and \
               self.b == other.b and \
               self.G == other.G

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.a, self.b, self.p, self.G))

    def __str__(self):
        return "y^2 = x^3 + " + str(self.a) + " * x + " + str(self.b) + " mod (" + str(self.p) + ")"

    # group law

    def is_on_curve(self, point):
        if point.inf:
            return True
        if point.x >= self.p or point.y >= self.p:
            return False
        return (point.y * point.y - (point.x ** 3 + self.a * point.x + self.b)) % self.p == 0

    def negate(self, point):
        if point.inf:
            return INFINITY
        return Point(point.x, -point.y % self.p)

    def add(self, P, Q):
        if not P.inf and not Q.inf and P.x == Q.x and (P.y + Q.y) % self.p == 0:
            return INFINITY
        if P.inf:
            return Q
        if Q.inf:
            return P
        if P == Q:
            lam = (3 * P.x * P.x + self.a) * mod_inv(2 * P.y, self.p) % self.p
        else:
            lam = (Q.y - P.y) * mod_inv(Q.x - P.x, self.p) % self.p
        x = (lam * lam - P.x - Q.x) % self.p
        y = (lam * (P.x - x) - P.y) % self.p
        return Point(x, y)

    def subtract(self, P, Q):
        return self.add(P, self.negate(Q))

    def multiply(self, point, t):
        """double and add, from the least significant bit of t"""
        if not isinstance(t, int):
            raise TypeError("multiplication only with int")
        if t < 0:
            raise ValueError("scalar must be non-negative")
        result = INFINITY
        addend = point
        for i in range(t.bit_length() + 1):
            if (t >> i) & 1:
                result = self.add(addend, result)
            addend = self.add(addend, addend)
        return result

    # points from x

    def points_for_x(self, x):
        """the 0, 1 or 2 points with the given x, (x, y) before (x, p - y)"""
        if not isinstance(x, int):
            raise TypeError("x must be an int")
        x %= self.p
        y = sqrt_mod_p(x ** 3 + self.a * x + self.b, self.p)
        if y is None:
            return []
        y1 = y % self.p
        y2 = -y % self.p
        if y1 == y2:
            return [Point(x, y1)]
        return [Point(x, y1), Point(x, y2)]

    def point_from_x(self, x, y_odd):
        if y_odd not in (0, 1):
            raise ValueError("y_odd must be 0 or 1")
        points = self.points_for_x(x)
        if not points:
            raise NotOnCurveError(str(x) + " is not a licit coordinate for a point on the curve")
        for point in points:
            if point.y % 2 == y_odd:
                return point
        raise NotOnCurveError("no point with x = " + str(x) + " and y of parity " + str(y_odd))

    def points(self):
        """every point of the curve, infinity last, only sensible for small p"""
        for x in range(self.p):
            for point in self.points_for_x(x):
                yield point
        yield INFINITY

    # subgroup order

    def order(self, point):
        return self.order_strategy.order(self, point)

    @property
    def generator_order(self):
        if self._generator_order is None:
            self._generator_order = self.order(self.G)
        return self._generator_order

    # byte <-> point code table

    def code_table(self):
        """
        dict byte -> point, built once and shared
        offsets run from -128 upward and the multiplier is offset + 128,
        multiples equal to infinity are skipped; slot i belongs to the signed
        byte -128 + i, so unsigned 0x80 gets 1 * G and 0x7f gets 256 * G
        """
        if self._table is None:
            with self._lock:
                if self._table is None:
                    self._build_code_table()
        return self._table

    def _build_code_table(self):
        l.debug("building code table for %s", self)
        table = {}
        inverse = {}
        slot = -128
        # offset -128, multiplier 0
        candidate = INFINITY
        while len(table) < TABLE_SIZE:
            if not candidate.inf:
                if candidate in inverse:
                    raise CodeTableError("generator " + str(self.G) + " has fewer than " +
                                         str(TABLE_SIZE) + " distinct multiples")
                byte = slot % 256
                table[byte] = candidate
                inverse[candidate] = byte
                slot += 1
            candidate = self.add(candidate, self.G)
        self._inverse_table = inverse
        self._table = table

    def encode(self, byte):
        if not isinstance(byte, int):
            raise TypeError("byte must be an int")
        if byte < 0 or byte > 0xff:
            raise ValueError("byte must be in [0..255]")
        return self.code_table()[byte]

    def decode(self, point):
        self.code_table()
        try:
            return self._inverse_table[point]
        except KeyError:
            raise UnmappableByteError(point) from None

    # ElGamal and Diffie-Hellman

    def _check_point(self, point):
        if not isinstance(point, (Point, PointAtInfinity)):
            raise TypeError("expected a Point")
        if not self.is_on_curve(point):
            raise NotOnCurveError("the point " + str(point) + " is not on the curve")

    def _check_public(self, Q):
        if not isinstance(Q, (Point, PointAtInfinity)):
            raise TypeError("expected a Point")
        if Q.inf:
            raise ValueError("public key cannot be the point @ infinity")
        if not self.is_on_curve(Q):
            raise NotOnCurveError("public key " + str(Q) + " is not on the curve")

    def generate_keypair(self, rng=None):
        d = random_scalar(self.generator_order, rng)
        return d, self.multiply(self.G, d)

    def encrypt_byte(self, byte, Q, rng=None):
        k = random_scalar(self.generator_order, rng)
        C = self.multiply(self.G, k)
        M = self.encode(byte)
        D = self.add(M, self.multiply(Q, k))
        return C, D

    def decrypt_pair(self, pair, d):
        C, D = pair
        self._check_point(C)
        self._check_point(D)
        M = self.subtract(D, self.multiply(C, d))
        return self.decode(M)

    def encrypt(self, data, Q, rng=None):
        """list of (C, D) point pairs, one per byte of data"""
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("data must be bytes")
        self._check_public(Q)
        return [self.encrypt_byte(byte, Q, rng) for byte in data]

    def decrypt(self, ciphertext, d):
        if not isinstance(d, int):
            raise TypeError("private key must be an int")
        return bytes(self.decrypt_pair(pair, d) for pair in ciphertext)

    def shared_secret(self, d, Q):
        """x coordinate of d * Q"""
        self._check_public(Q)
        S = self.multiply(Q, d)
        if S.inf:
            raise ValueError("shared point is the point @ infinity")
        return S.x
