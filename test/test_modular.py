import pytest

from ecelgamal import sqrt_mod_p, find_non_residue, is_quadratic_residue, mod_inv
from ecelgamal import DegenerateModulusError, NoQuadraticNonResidueError


@pytest.mark.parametrize("p", [13, 17, 41, 97, 113, 257, 337, 883, 7681])
def test_sqrt_of_every_residue(p):
    residues = {x * x % p for x in range(1, p)}
    for r in residues:
        s = sqrt_mod_p(r, p)
        assert s is not None
        assert s * s % p == r


@pytest.mark.parametrize("p", [13, 17, 97, 883])
def test_non_residues_have_no_root(p):
    residues = {x * x % p for x in range(1, p)}
    for r in range(1, p):
        if r not in residues:
            assert sqrt_mod_p(r, p) is None


def test_known_roots():
    # 883 = 3 (mod 4), closed form
    assert sqrt_mod_p(403, 883) == 455
    assert sqrt_mod_p(11, 883) is None
    # 97 = 1 (mod 4), general branch
    s = sqrt_mod_p(36, 97)
    assert s in (6, 91)


def test_sqrt_of_zero_and_reduction():
    assert sqrt_mod_p(0, 97) == 0
    assert sqrt_mod_p(97, 97) == 0
    s = sqrt_mod_p(403 + 883, 883)
    assert s * s % 883 == 403


def test_even_modulus():
    with pytest.raises(DegenerateModulusError):
        sqrt_mod_p(4, 10)
    with pytest.raises(ValueError):
        sqrt_mod_p(1, 2)


def test_find_non_residue():
    assert find_non_residue(883) == 2
    assert find_non_residue(97) == 5
    assert not is_quadratic_residue(find_non_residue(7681), 7681)
    with pytest.raises(NoQuadraticNonResidueError):
        find_non_residue(1)


def test_mod_inv():
    for a in range(1, 97):
        assert a * mod_inv(a, 97) % 97 == 1
    assert mod_inv(-3, 97) * -3 % 97 == 1
    with pytest.raises(ZeroDivisionError):
        mod_inv(97, 97)
