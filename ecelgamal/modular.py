#!/usr/bin/env python3

"""
modular arithmetic over a prime field
square roots follow Tonelli-Shanks, written with repeated halving of the
exponent instead of explicit bit indexing
"""

from .errors import DegenerateModulusError, NoQuadraticNonResidueError


def mod_inv(a, p):
    # p must be prime
    if a % p == 0:
        raise ZeroDivisionError("0 has no inverse mod " + str(p))
    return pow(a, p - 2, p)


def is_quadratic_residue(a, p):
    """Euler's criterion, 0 is not counted as a residue"""
    return pow(a, (p - 1) // 2, p) == 1


def find_non_residue(p):
    """smallest a >= 2 with a^((p-1)/2) != 1 (mod p)"""
    q = (p - 1) // 2
    for a in range(2, p):
        if pow(a, q, p) != 1:
            return a
    raise NoQuadraticNonResidueError("no quadratic non-residue mod " + str(p))


def sqrt_mod_p(residue, p):
    """
    return x with x^2 = residue (mod p), or None if residue is a non-residue
    p must be an odd prime
    """
    if p % 2 == 0:
        raise DegenerateModulusError("modulus must be odd, got " + str(p))
    residue %= p
    if residue == 0:
        return 0
    q = (p - 1) // 2
    if pow(residue, q, p) != 1:
        return None
    while q % 2 == 0:
        q //= 2
        if pow(residue, q, p) != 1:
            return _sqrt_general(residue, q, p)
    # p = 3 (mod 4)
    q = (q + 1) // 2
    return pow(residue, q, p)


def _sqrt_general(residue, q, p):
    a = find_non_residue(p)
    half = (p - 1) // 2
    t = half
    while q % 2 == 0:
        q //= 2
        t //= 2
        if pow(residue, q, p) != pow(a, t, p):
            t += half
    q = (q - 1) // 2
    t //= 2
    return pow(mod_inv(residue, p), q, p) * pow(a, t, p) % p
