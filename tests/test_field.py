import pytest
from hypothesis import given
from hypothesis import strategies as st

from sharesplit.errors import DivisionByZero, InvalidParameters, InvalidShareSet
from sharesplit.field import PRIME, mod_inverse, mod_pow, normalize


def test_mod_pow_matches_builtin():
    for base in (0, 1, 2, 3, 255, 256, 1000, -5):
        for exponent in (0, 1, 2, 7, 128, 255, 256):
            assert mod_pow(base, exponent, PRIME) == pow(base, exponent, PRIME)


def test_mod_pow_zero_exponent_is_one():
    assert mod_pow(0, 0) == 1
    assert mod_pow(123, 0, 257) == 1


def test_mod_pow_rejects_negative_exponent():
    with pytest.raises(InvalidParameters):
        mod_pow(2, -1)


def test_mod_inverse_known_values():
    assert mod_inverse(1) == 1
    assert mod_inverse(2) == 129
    assert mod_inverse(256) == 256
    assert mod_inverse(-1) == 256
    assert mod_inverse(258) == 1


def test_mod_inverse_of_zero_fails():
    with pytest.raises(DivisionByZero) as exc:
        mod_inverse(0)
    assert isinstance(exc.value, InvalidShareSet)
    assert isinstance(exc.value, ZeroDivisionError)

    with pytest.raises(DivisionByZero):
        mod_inverse(PRIME * 3)


def test_normalize_handles_negative_values():
    assert normalize(-1) == 256
    assert normalize(-257) == 0
    assert normalize(514) == 0


@given(st.integers(min_value=1, max_value=PRIME - 1))
def test_mod_inverse_is_an_involution(k):
    inverse = mod_inverse(k)
    assert 0 < inverse < PRIME
    assert (k * inverse) % PRIME == 1
    assert mod_inverse(inverse) == k


@given(st.integers(min_value=-10_000, max_value=10_000), st.integers(min_value=0, max_value=600))
def test_mod_pow_is_reduced(base, exponent):
    result = mod_pow(base, exponent)
    assert 0 <= result < PRIME
    assert result == pow(base, exponent, PRIME)
