#!/usr/bin/env python3

"""
console front end
$ ecdemo --curve demo --message "hello"
$ ecpoints -a 2 -b 3 -p 97 -g 3 6 --orders
$ eckeygen --curve secp256k1
"""

# packages
import logging
from argparse import ArgumentParser

from numpy import array, unique
from pytictoc import TicToc

from .curve import Curve
from .curves import CURVES, get_curve
from .point import Point

default_message = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxy" + \
                  "z `~1!2@3#4$5%6^7&8*9(0)-_=+[{]}|\\:;\"',<.>/?"
max_enumerated_prime = 2 ** 16


def _add_curve_argument(parser):
    parser.add_argument("-c", "--curve", choices=sorted(CURVES), default="demo",
                        help="named curve, default is the small demo curve")


def _set_verbosity(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def demo(argv=None):
    parser = ArgumentParser(description="ElGamal encryption and Diffie-Hellman between Alice and Bob")
    _add_curve_argument(parser)
    parser.add_argument("-m", "--message", type=str, default=default_message, help="cleartext to encrypt")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    _set_verbosity(args.verbose)
    curve = get_curve(args.curve)
    t = TicToc()

    t.tic()
    order = curve.generator_order
    alice_prv, alice_pub = curve.generate_keypair()
    bob_prv, bob_pub = curve.generate_keypair()
    keys_time = t.tocvalue()

    message_bytes = args.message.encode("utf-8")
    t.tic()
    ciphertext = curve.encrypt(message_bytes, bob_pub)
    encrypt_time = t.tocvalue()
    t.tic()
    cleartext_bytes = curve.decrypt(ciphertext, bob_prv)
    decrypt_time = t.tocvalue()

    alice_shared = curve.shared_secret(alice_prv, bob_pub)
    bob_shared = curve.shared_secret(bob_prv, alice_pub)

    print("curve:\n" + str(curve))
    print("order of G:\n" + str(order))
    print("Original Cleartext:\t" + args.message)
    if args.verbose:
        print("Ciphertext:\t" + "[" + ", ".join("[" + str(c) + ", " + str(d) + "]" for c, d in ciphertext) + "]")
    print("Recovered Cleartext:\t" + cleartext_bytes.decode("utf-8", errors="replace"))
    print("Original Bytes: \t" + str(list(message_bytes)))
    print("Recovered Bytes:\t" + str(list(cleartext_bytes)))
    print("Round trip:\t" + str(cleartext_bytes == message_bytes))
    print("Alice's Derived Secret:\t" + str(alice_shared))
    print("Bob's Derived Secret:\t" + str(bob_shared))
    print("Shared secret identical:\t" + str(alice_shared == bob_shared))
    print("keys in %.4f s, encryption in %.4f s, decryption in %.4f s" % (keys_time, encrypt_time, decrypt_time))
    return cleartext_bytes == message_bytes and alice_shared == bob_shared


def list_points(argv=None):
    parser = ArgumentParser(description="Enumerate the points of a small curve")
    _add_curve_argument(parser)
    parser.add_argument("-a", type=int, help="coefficient a, needs -b -p -g")
    parser.add_argument("-b", type=int, help="coefficient b")
    parser.add_argument("-p", type=int, help="odd prime modulus")
    parser.add_argument("-g", type=int, nargs=2, metavar=("X", "Y"), help="generator point")
    parser.add_argument("-o", "--orders", help="print the order of each point", action="store_true")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    _set_verbosity(args.verbose)
    custom = (args.a, args.b, args.p, args.g)
    if any(v is not None for v in custom):
        if any(v is None for v in custom):
            parser.error("-a, -b, -p and -g must be given together")
        curve = Curve(args.a, args.b, args.p, Point(args.g[0], args.g[1]))
    else:
        curve = get_curve(args.curve)
    if curve.p > max_enumerated_prime:
        raise ValueError("p is too large to enumerate, at most " + str(max_enumerated_prime))
    print("curve:\n" + str(curve))
    count = 0
    orders = []
    for point in curve.points():
        count += 1
        if args.orders:
            orders.append(curve.order(point))
            print("Point " + str(point) + " has order:\t" + str(orders[-1]))
        else:
            print(str(point))
    if args.orders:
        values, counts = unique(array(orders), return_counts=True)
        for value, n in zip(values, counts):
            print("points of order " + str(value) + ":\t" + str(n))
    print("Number of points found:\t" + str(count))
    return count


def keygen(argv=None):
    parser = ArgumentParser(description="Generate a private scalar and its public point")
    _add_curve_argument(parser)
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    _set_verbosity(args.verbose)
    curve = get_curve(args.curve)
    prv, pub = curve.generate_keypair()
    print("private key in hex:\n" + hex(prv)[2:])
    print("public key:\n" + str(pub))
    if args.verbose:
        print("curve:\n" + str(curve))
        print("order of G:\n" + str(curve.generator_order))
    print("key size:\n" + str(curve.generator_order.bit_length()) + " bits")
    return prv, pub
