import random

import pytest

from ecelgamal import Curve, Point, get_curve


@pytest.fixture
def curve():
    return get_curve("demo")


@pytest.fixture
def secp256k1():
    return get_curve("secp256k1")


@pytest.fixture
def curve97():
    return Curve(2, 3, 97, Point(3, 6))


@pytest.fixture
def rng():
    return random.Random(1337)
