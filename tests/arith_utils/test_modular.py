"""
Tests for modular.py - Integer modular arithmetic primitives
"""

import math

import pytest
from weierstrass import errors
from weierstrass.arith_utils import modular


class TestAddSubMul:
    """Tests for modular addition, subtraction and multiplication."""

    @pytest.mark.parametrize(
        "a,b,n,expected",
        [
            (1, 3, 5, 4),
            (3, 4, 5, 2),
            (0, 0, 7, 0),
            (modular.WORD_MAX - 1, modular.WORD_MAX - 1, modular.WORD_MAX, modular.WORD_MAX - 2),
        ],
    )
    def test_mod_add(self, a, b, n, expected):
        """Test modular addition, including values near the word limit."""
        assert modular.mod_add(a, b, n) == expected

    @pytest.mark.parametrize(
        "a,b,n,expected",
        [
            (4, 1, 5, 3),
            (1, 4, 5, 2),
            (3, 3, 5, 0),
            (0, 6, 7, 1),
        ],
    )
    def test_mod_sub(self, a, b, n, expected):
        """Test modular subtraction never goes negative."""
        assert modular.mod_sub(a, b, n) == expected

    def test_mod_mul_near_word_limit(self):
        """Test multiplication with a double-word intermediate."""
        n = modular.WORD_MAX
        a = n - 1
        assert modular.mod_mul(a, a, n) == 1

    @pytest.mark.parametrize(
        "a,n,expected",
        [
            (0, 5, 0),
            (1, 5, 4),
            (4, 5, 1),
            (12, 5, 3),
        ],
    )
    def test_additive_inverse(self, a, n, expected):
        """Test additive inverse stays within [0, n)."""
        assert modular.additive_inverse(a, n) == expected


class TestExtendedEuclid:
    """Tests for the extended Euclidean algorithm and inverses."""

    @pytest.mark.parametrize(
        "a,b",
        [(240, 46), (17, 5), (0, 9), (9, 0), (97, 96), (2**31 - 1, 12345)],
    )
    def test_extended_gcd_bezout(self, a, b):
        """Test that the Bezout identity holds."""
        g, x, y = modular.extended_gcd(a, b)
        assert g == math.gcd(a, b)
        assert a * x + b * y == g

    @pytest.mark.parametrize("n", [2, 5, 23, 97])
    def test_inverse_for_every_unit(self, n):
        """Test a * inverse(a) == 1 for every nonzero value of a prime modulus."""
        for a in range(1, n):
            inv = modular.multiplicative_inverse(a, n)
            assert 0 < inv < n
            assert (a * inv) % n == 1

    def test_inverse_composite_modulus_units(self):
        """Test inverses modulo a composite for values coprime to it."""
        n = 12
        for a in (1, 5, 7, 11):
            assert (a * modular.multiplicative_inverse(a, n)) % n == 1

    @pytest.mark.parametrize("a,n,gcd", [(2, 4, 2), (6, 9, 3), (10, 15, 5)])
    def test_no_inverse(self, a, n, gcd):
        """Test values sharing a factor with the modulus have no inverse."""
        with pytest.raises(errors.NoMultiplicativeInverseError) as exc_info:
            modular.multiplicative_inverse(a, n)
        assert exc_info.value.gcd == gcd
        assert exc_info.value.modulus == n

    @pytest.mark.parametrize("a", [0, 5, 10])
    def test_inverse_of_zero(self, a):
        """Test inverting a value congruent to 0."""
        with pytest.raises(errors.DivisionByZeroError, match="Division by zero"):
            modular.multiplicative_inverse(a, 5)

    def test_mod_div(self):
        """Test modular division."""
        assert modular.mod_div(3, 4, 5) == 2  # 4 * 2 = 8 = 3 mod 5


class TestModPow:
    """Tests for square-and-multiply exponentiation."""

    @pytest.mark.parametrize(
        "a,e,n",
        [(2, 10, 1000), (3, 0, 7), (0, 0, 7), (5, 3, 13), (7, 96, 97), (123456, 65537, modular.WORD_MAX)],
    )
    def test_matches_builtin_pow(self, a, e, n):
        """Test results agree with the built-in three-argument pow."""
        assert modular.mod_pow(a, e, n) == pow(a, e, n)

    @pytest.mark.parametrize("a,e", [(0, 0), (3, 0), (3, 5)])
    def test_trivial_modulus(self, a, e):
        """Test every power is 0 when the modulus is 1."""
        assert modular.mod_pow(a, e, 1) == 0

    def test_negative_exponent(self):
        """Test a negative exponent inverts first."""
        assert modular.mod_pow(3, -1, 5) == 2
        assert modular.mod_pow(3, -2, 5) == 4

    def test_negative_exponent_of_zero(self):
        """Test a negative power of zero fails like a division by zero."""
        with pytest.raises(errors.DivisionByZeroError):
            modular.mod_pow(0, -1, 5)


class TestPrimality:
    """Tests for the primality check used to flag composite moduli."""

    @pytest.mark.parametrize("n", [2, 3, 5, 17, 23, 61, 97, 223, 7919, 2**31 - 1, 4294967291])
    def test_primes(self, n):
        """Test known primes."""
        assert modular.is_probable_prime(n)

    @pytest.mark.parametrize("n", [0, 1, 4, 9, 12, 91, 561, 25326001, 3215031751, modular.WORD_MAX])
    def test_composites(self, n):
        """Test small values, Carmichael numbers and strong pseudoprimes."""
        assert not modular.is_probable_prime(n)
