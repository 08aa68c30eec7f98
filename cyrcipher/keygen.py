import math
import secrets
from .params import BAG_GROUP_BITS
from .numtheory import gen_prime, next_prime, generate_superincreasing_sequence
from .rsa_block import RsaKey
from .bag import BagKey

# -----------------------------
# RSA-like keys
# -----------------------------
def pick_coprime(modulus: int, low: int, high: int, tries: int = 1000) -> int:
    """Random value in [low, high] coprime to modulus; odd search from 3 if the range yields none."""
    if low <= high:
        for _ in range(tries):
            e = low + secrets.randbelow(high - low + 1)
            if math.gcd(e, modulus) == 1:
                return e
    e = 3
    while math.gcd(e, modulus) != 1:
        e += 2
    return e

def generate_rsa_key(bits: int = 22, exponent_range: tuple = (1000, 3000)) -> RsaKey:
    """Two distinct primes of bits // 2 bits each (at least 5, so N has three or more digits)."""
    half = max(bits // 2, 5)
    while True:
        p = gen_prime(half)
        q = gen_prime(half)
        phi = (p - 1) * (q - 1)
        # every chunk below N must fit the width of phi
        if p != q and len(str(phi)) == len(str(p * q)):
            break
    low, high = exponent_range
    e = pick_coprime(phi, low, min(high, phi - 1))
    return RsaKey(n=p * q, e=e, p=p)

# -----------------------------
# Knapsack keys
# -----------------------------
def generate_bag_key(start: int = None, modulus_slack: int = 1024) -> BagKey:
    start = start or 1 + secrets.randbelow(7)
    seq = generate_superincreasing_sequence(BAG_GROUP_BITS, start=start)
    n = next_prime(sum(seq) + 1 + secrets.randbelow(modulus_slack))
    e = pick_coprime(n, 1024, n - 1)
    return BagKey(sequence=seq, n=n, e=e)

# -----------------------------
# Key <-> JSON dicts
# -----------------------------
def rsa_key_to_dict(key: RsaKey) -> dict:
    return {"n": key.n, "e": key.e, "p": key.p, "q": key.q, "d": key.d}

def rsa_key_from_dict(data: dict) -> RsaKey:
    return RsaKey(n=int(data["n"]), e=int(data["e"]), p=int(data["p"]))

def bag_key_to_dict(key: BagKey) -> dict:
    return {"sequence": list(key.sequence), "n": key.n, "e": key.e}

def bag_key_from_dict(data: dict) -> BagKey:
    return BagKey(sequence=data["sequence"], n=int(data["n"]), e=int(data["e"]))
