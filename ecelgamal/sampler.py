#!/usr/bin/env python3

"""
private scalars in [1, n-1]
"""

from secrets import SystemRandom

_system_random = SystemRandom()


def random_scalar(n, rng=None):
    """
    uniform integer in [1, n-1] by rejection sampling
    candidates have the bit length of n-1 and are redrawn until < n-1, then
    shifted by one; rng is anything with getrandbits, default is the os source
    """
    if not isinstance(n, int):
        raise TypeError("n must be an int")
    if n < 2:
        raise ValueError("n must be at least 2")
    if rng is None:
        rng = _system_random
    bound = n - 1
    bits = bound.bit_length()
    candidate = rng.getrandbits(bits)
    while candidate >= bound:
        candidate = rng.getrandbits(bits)
    return candidate + 1
