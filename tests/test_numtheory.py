import math
import random
import pytest
from cyrcipher import (
    NoModularInverse,
    pow_mod, egcd, mod_inverse, is_probable_prime, gen_prime, next_prime,
    is_superincreasing, generate_superincreasing_sequence, BAG_SEQUENCE,
)

def test_pow_mod_matches_builtin():
    rng = random.Random(7)
    for _ in range(200):
        base, mod, exp = rng.randrange(0, 10**9), rng.randrange(1, 10**7), rng.randrange(0, 10**6)
        assert pow_mod(base, mod, exp) == pow(base, exp, mod)

def test_pow_mod_zero_exponent():
    assert pow_mod(12345, 1873363, 0) == 1
    assert pow_mod(5, 1, 0) == 0

def test_pow_mod_rejects_bad_arguments():
    with pytest.raises(ValueError):
        pow_mod(2, 0, 3)
    with pytest.raises(ValueError):
        pow_mod(2, 7, -1)

def test_egcd_identity():
    g, x, y = egcd(240, 46)
    assert g == 2
    assert 240 * x + 46 * y == g

def test_mod_inverse_correctness():
    rng = random.Random(11)
    checked = 0
    while checked < 200:
        m = rng.randrange(2, 10**6)
        a = rng.randrange(1, 10**7)
        if math.gcd(a, m) != 1:
            continue
        assert (a * mod_inverse(a, m)) % m == 1
        checked += 1

def test_mod_inverse_reference_constants():
    assert (1427 * mod_inverse(1427, 996 * 1878)) % (996 * 1878) == 1
    assert (415238 * mod_inverse(415238, 1000003)) % 1000003 == 1

def test_mod_inverse_not_coprime():
    with pytest.raises(NoModularInverse) as exc:
        mod_inverse(415238, 1000004)
    assert exc.value.value == 415238
    assert exc.value.modulus == 1000004

@pytest.mark.parametrize("n,expected", [
    (0, False), (1, False), (2, True), (3, True), (4, False), (997, True),
    (1879, True), (1873363, False), (1000003, True), (1024003, False),
])
def test_is_probable_prime(n, expected):
    assert is_probable_prime(n) is expected

def test_gen_prime_bit_length():
    p = gen_prime(12)
    assert p.bit_length() == 12
    assert is_probable_prime(p)

def test_next_prime():
    assert next_prime(1024000) == 1024021
    assert next_prime(1000000) == 1000003
    assert next_prime(997) == 997
    assert next_prime(0) == 2

def test_is_superincreasing():
    assert is_superincreasing(BAG_SEQUENCE)
    assert is_superincreasing([1, 2, 4, 8])
    assert not is_superincreasing([1, 2, 3])
    assert not is_superincreasing([0, 1])
    assert is_superincreasing([])

def test_generate_superincreasing_sequence():
    seq = generate_superincreasing_sequence(16, start=3)
    assert len(seq) == 16
    assert seq[0] == 3
    assert is_superincreasing(seq)
    for i in range(1, len(seq)):
        assert 1 <= seq[i] - sum(seq[:i]) <= 16

def test_generate_superincreasing_sequence_rejects_bad_parameters():
    with pytest.raises(ValueError):
        generate_superincreasing_sequence(0)
    with pytest.raises(ValueError):
        generate_superincreasing_sequence(4, min_gap=5, max_gap=2)
