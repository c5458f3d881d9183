import random

import pytest

from ecelgamal import random_scalar


class ScriptedBits(object):

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def getrandbits(self, k):
        self.calls.append(k)
        return self.values.pop(0)


def test_range():
    rng = random.Random(42)
    seen = set()
    for _ in range(2000):
        k = random_scalar(10, rng)
        assert 1 <= k <= 9
        seen.add(k)
    assert seen == set(range(1, 10))


def test_default_source():
    for _ in range(100):
        assert 1 <= random_scalar(832) <= 831


def test_smallest_bound():
    for _ in range(20):
        assert random_scalar(2) == 1


def test_rejects_out_of_range_candidates():
    # bound is 5, candidates of 3 bits, 7 and 5 are redrawn
    rng = ScriptedBits([7, 5, 2])
    assert random_scalar(6, rng) == 3
    assert rng.calls == [3, 3, 3]


def test_invalid_bound():
    with pytest.raises(ValueError):
        random_scalar(1)
    with pytest.raises(TypeError):
        random_scalar(10.0)
