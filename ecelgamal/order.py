#!/usr/bin/env python3

"""
strategies answering the order of the cyclic subgroup generated by a point

NaiveOrder counts multiples until the identity shows up again, usable only
on small curves; KnownOrder takes the order of the generator as a curve
parameter, as for standard curves
"""

import logging

from .errors import OrderNotFoundError

l = logging.getLogger(__name__)


class NaiveOrder(object):

    def __init__(self, max_steps=None):
        if max_steps is not None and (not isinstance(max_steps, int) or max_steps < 1):
            raise ValueError("max_steps must be a positive int")
        self.max_steps = max_steps

    def order(self, curve, point):
        # t = 0 gives the first infinity, the count stops at the second one
        count = 1
        q = point
        while not q.inf:
            count += 1
            if self.max_steps is not None and count > self.max_steps:
                raise OrderNotFoundError("order of " + str(point) + " exceeds " + str(self.max_steps))
            q = curve.add(q, point)
        l.debug("order of %s is %d", point, count)
        return count

    def __str__(self):
        return "naive order" if self.max_steps is None else "naive order, at most " + str(self.max_steps)


def prime_factors(n, bound=2 ** 16):
    """
    distinct prime factors of n by trial division up to bound
    a cofactor left above bound is taken as prime, which holds for the
    orders of standard curves (a prime times a small cofactor)
    """
    factors = []
    f = 2
    while f <= bound and f * f <= n:
        if n % f == 0:
            factors.append(f)
            while n % f == 0:
                n //= f
        f += 1 if f == 2 else 2
    if n > 1:
        factors.append(n)
    return factors


class KnownOrder(object):

    def __init__(self, n):
        if not isinstance(n, int):
            raise TypeError("order must be an int")
        if n < 2:
            raise ValueError("order must be at least 2")
        self.n = n
        self._factors = None

    def order(self, curve, point):
        if point.inf:
            return 1
        if point == curve.G:
            return self.n
        if not curve.multiply(point, self.n).inf:
            # outside the subgroup of G
            return NaiveOrder(self.n).order(curve, point)
        if self._factors is None:
            self._factors = prime_factors(self.n)
        # the order divides n, strip every prime factor that still gives infinity
        order = self.n
        for f in self._factors:
            while order % f == 0 and curve.multiply(point, order // f).inf:
                order //= f
        l.debug("order of %s is %d", point, order)
        return order

    def __str__(self):
        return "known order " + str(self.n)
