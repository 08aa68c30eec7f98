import math
import secrets
from .errors import NoModularInverse

def pow_mod(base: int, modulus: int, exponent: int) -> int:
    """base**exponent mod modulus by square-and-multiply."""
    if modulus < 1:
        raise ValueError(f"Modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result

def egcd(a: int, b: int) -> tuple:
    if a == 0:
        return b, 0, 1
    gcd, x1, y1 = egcd(b % a, a)
    x = y1 - (b // a) * x1
    y = x1
    return gcd, x, y

def mod_inverse(a: int, modulus: int) -> int:
    if modulus < 1:
        raise ValueError(f"Modulus must be positive, got {modulus}")
    g, x, _ = egcd(a % modulus, modulus)
    if g != 1:
        raise NoModularInverse(a, modulus)
    return x % modulus

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

def _is_witness(a: int, n: int, s: int, d: int) -> bool:
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = (x * x) % n
        if x == n - 1:
            return False
    return True

def is_probable_prime(n: int, trials: int = 5) -> bool:
    # fixed bases settle every n below 3.3e24; random trials cover the rest
    if n < 2:
        return False
    for sp in SMALL_PRIMES:
        if n % sp == 0:
            return n == sp
    s, d = 0, n - 1
    while d % 2 == 0:
        s += 1
        d //= 2
    bases = list(SMALL_PRIMES) + [secrets.randbelow(n - 3) + 2 for _ in range(trials)]
    return not any(_is_witness(a, n, s, d) for a in bases)

def gen_prime(bits: int) -> int:
    if bits < 2:
        raise ValueError("Need at least 2 bits for a prime")
    while True:
        p = secrets.randbits(bits)
        p |= (1 << (bits - 1)) | 1
        if is_probable_prime(p):
            return p

def next_prime(n: int) -> int:
    """Smallest prime >= n."""
    candidate = max(2, math.ceil(n))
    while not is_probable_prime(candidate):
        candidate += 1
    return candidate

def is_superincreasing(seq) -> bool:
    total = 0
    for term in seq:
        if term <= total:
            return False
        total += term
    return True

def generate_superincreasing_sequence(length: int, start: int = 1, min_gap: int = 1, max_gap: int = 16) -> list:
    """
    Each term is the sum of all previous terms plus a random gap
    in [min_gap, max_gap].
    """
    if length < 1:
        raise ValueError("Sequence length must be positive")
    if start < 1 or min_gap < 1 or max_gap < min_gap:
        raise ValueError(f"Invalid sequence parameters: start={start}, gaps=[{min_gap}, {max_gap}]")
    seq = [start]
    while len(seq) < length:
        seq.append(sum(seq) + min_gap + secrets.randbelow(max_gap - min_gap + 1))
    return seq
