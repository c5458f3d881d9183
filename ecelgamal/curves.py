#!/usr/bin/env python3

"""
named curves as static parameters: prime, a, b, (gx, gy), order
order None means the order of G is counted when first needed
"""

from .curve import Curve
from .point import Point

# small curve for demonstration, G generates all 832 points
demo_param = 883, 7, 11, (7, 455), None

# secp256k1
ec_prime = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
ec_a = 0
ec_b = 7
ec_gx = 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
ec_gy = 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8
ec_G = (ec_gx, ec_gy)
ec_order = 0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141
secp256k1_param = ec_prime, ec_a, ec_b, ec_G, ec_order

CURVES = {
    "demo": demo_param,
    "secp256k1": secp256k1_param,
}


def curve_from_param(param):
    prime, a, b, (gx, gy), order = param
    return Curve(a, b, prime, Point(gx, gy), order)


def get_curve(name):
    if name not in CURVES:
        raise ValueError("unknown curve " + repr(name) + ", expected one of " + ", ".join(sorted(CURVES)))
    return curve_from_param(CURVES[name])
