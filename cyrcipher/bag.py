# cyrcipher/bag.py
"""
Knapsack ("bag") cipher.

Letters are packed into 5-bit codes, the bit stream is cut into 16-bit
groups and every group is sent as the sum of the private superincreasing
sequence terms picked by its set bits. The sequence travels scaled by E
modulo N; the receiver unscales it with E^-1 mod N and peels each sum back
into bits greedily, largest term first.
"""
import math
from dataclasses import dataclass
from functools import cached_property
import numpy as np
from .params import CYRILLIC, Alphabet, BAG_MULTIPLIER, BAG_GROUP_BITS
from .errors import InvalidKeyMaterial, KnapsackReconstructionFailed
from .numtheory import mod_inverse, is_superincreasing
from .bits import text_to_bits, bits_to_text, pad_bits
from .serialization import BagWire, strip_trailing_newline

@dataclass
class BagKey:
    sequence: tuple
    n: int
    e: int = BAG_MULTIPLIER

    def __post_init__(self):
        self.sequence = tuple(int(s) for s in self.sequence)
        if len(self.sequence) != BAG_GROUP_BITS:
            raise InvalidKeyMaterial(f"Sequence must have {BAG_GROUP_BITS} terms, got {len(self.sequence)}")
        if self.sequence[0] < 1 or not is_superincreasing(self.sequence):
            raise InvalidKeyMaterial(f"Sequence is not a positive superincreasing sequence: {list(self.sequence)}")
        if self.n <= sum(self.sequence):
            raise InvalidKeyMaterial(f"Modulus N={self.n} must exceed the sequence sum {sum(self.sequence)}")
        if math.gcd(self.e, self.n) != 1:
            raise InvalidKeyMaterial(f"Multiplier E={self.e} is not coprime to N={self.n}")

    @property
    def public_sequence(self) -> list[int]:
        return scale_sequence(self.sequence, self.e, self.n)

    @cached_property
    def d(self) -> int:
        return mod_inverse(self.e, self.n)

def scale_sequence(seq, factor: int, n: int) -> list[int]:
    return [s * factor % n for s in seq]

def knapsack_sum(bits, seq) -> int:
    """Sum of seq[j] over the set bits j of one group."""
    return sum(int(s) for b, s in zip(bits, seq) if b)

def greedy_decompose(total: int, seq, group: int = None) -> np.ndarray:
    """Recover the bit group whose knapsack_sum over seq is total."""
    bits = np.zeros(len(seq), dtype=np.uint8)
    residue = total
    for j in reversed(range(len(seq))):
        if residue >= seq[j]:
            bits[j] = 1
            residue -= seq[j]
    if residue != 0:
        where = f" in group {group}" if group is not None else ""
        raise KnapsackReconstructionFailed(
            f"Sum {total}{where} leaves residue {residue} after greedy subtraction",
            group=group, residue=residue,
        )
    return bits

def text_to_sums(text: str, seq, alphabet: Alphabet = CYRILLIC) -> list[int]:
    bits = pad_bits(text_to_bits(text, alphabet), len(seq))
    return [knapsack_sum(group, seq) for group in bits.reshape(-1, len(seq))]

def sums_to_bits(sums, seq) -> np.ndarray:
    if not sums:
        return np.zeros(0, dtype=np.uint8)
    return np.concatenate([greedy_decompose(s, seq, group=i) for i, s in enumerate(sums)])

def bag_encode(text: str, sequence, n: int, e: int = BAG_MULTIPLIER, alphabet: Alphabet = CYRILLIC) -> str:
    key = BagKey(sequence=sequence, n=n, e=e)
    # sums are taken over the private sequence; only the scaled one is sent
    sums = text_to_sums(strip_trailing_newline(text), key.sequence, alphabet)
    return BagWire(e=key.e, public_sequence=key.public_sequence, sums=sums).format()

def recover_sequence(msg: BagWire, n: int) -> list[int]:
    d = mod_inverse(msg.e, n)
    seq = scale_sequence(msg.public_sequence, d, n)
    if not is_superincreasing(seq):
        raise KnapsackReconstructionFailed(
            f"Sequence recovered with N={n} is not superincreasing: {seq}"
        )
    return seq

def bag_decode(wire: str, n: int, alphabet: Alphabet = CYRILLIC) -> str:
    msg = BagWire.parse(wire, BAG_GROUP_BITS)
    seq = recover_sequence(msg, n)
    return bits_to_text(sums_to_bits(msg.sums, seq), alphabet)
