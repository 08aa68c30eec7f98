# cyrcipher/rsa_block.py
"""
RSA-like block cipher over alphabet numerals.

Letters become numerals 1..33, numerals are glued in groups of two-digit
decimals so that a group stays below N, and each group is raised to E
modulo N. Chunks are written at the fixed width of phi's decimal form, so
the blob needs no separators.
"""
from dataclasses import dataclass
from functools import cached_property
from .params import CYRILLIC, Alphabet, RSA_MODULUS, RSA_EXPONENT, NUMERAL_DIGITS
from .errors import InvalidKeyMaterial, MalformedWireFormat
from .numtheory import pow_mod, mod_inverse
from .numerals import text_to_numerals, numerals_to_text
from .serialization import RsaWire, strip_trailing_newline

@dataclass
class RsaKey:
    n: int
    e: int
    p: int

    def __post_init__(self):
        if self.n < 100:
            raise InvalidKeyMaterial(f"Modulus {self.n} is too small: a chunk needs at least three digits of N")
        if self.e < 1:
            raise InvalidKeyMaterial(f"Exponent must be positive, got {self.e}")
        if not 1 < self.p < self.n or self.n % self.p:
            raise InvalidKeyMaterial(f"p={self.p} is not a proper factor of N={self.n}")
        if len(str(self.phi)) < len(str(self.n)):
            # chunks below N must fit the fixed width of phi
            raise InvalidKeyMaterial(
                f"phi={self.phi} has fewer digits than N={self.n}; chunks would not fit a fixed width"
            )

    @property
    def q(self) -> int:
        return self.n // self.p

    @property
    def phi(self) -> int:
        return (self.p - 1) * (self.q - 1)

    @cached_property
    def d(self) -> int:
        return mod_inverse(self.e, self.phi)

    @property
    def group_len(self) -> int:
        """Numerals per chunk; any group of them, read as a decimal, stays below N."""
        return (len(str(self.n)) - 1) // 2

    @property
    def chunk_width(self) -> int:
        return len(str(self.phi))

def group_numerals(numerals: list[int], group_len: int) -> list[int]:
    """Right-pad with zero numerals and glue each group into one integer."""
    numerals = list(numerals)
    while len(numerals) % group_len:
        numerals.append(0)
    groups = []
    for i in range(0, len(numerals), group_len):
        digits = "".join(str(x).zfill(NUMERAL_DIGITS) for x in numerals[i:i + group_len])
        groups.append(int(digits))
    return groups

def ungroup_numerals(groups: list[int], group_len: int) -> list[int]:
    width = group_len * NUMERAL_DIGITS
    digits = ""
    for i, m in enumerate(groups):
        s = str(m)
        if len(s) > width:
            raise MalformedWireFormat(
                f"Chunk {i} decrypts to {m}, wider than {width} digits; wrong p?", field="chunks",
            )
        digits += s.zfill(width)
    return [int(digits[i:i + NUMERAL_DIGITS]) for i in range(0, len(digits), NUMERAL_DIGITS)]

def encrypt_groups(groups: list[int], key: RsaKey) -> str:
    out = []
    for m in groups:
        out.append(str(pow_mod(m, key.n, key.e)).zfill(key.chunk_width))
    return "".join(out)

def rsa_encode(text: str, p: int, n: int = RSA_MODULUS, e: int = RSA_EXPONENT, alphabet: Alphabet = CYRILLIC) -> str:
    key = RsaKey(n=n, e=e, p=p)
    numerals = text_to_numerals(strip_trailing_newline(text), alphabet)
    groups = group_numerals(numerals, key.group_len)
    return RsaWire(n=key.n, e=key.e, chunks=encrypt_groups(groups, key)).format()

def rsa_decode(wire: str, p: int, alphabet: Alphabet = CYRILLIC, strip_padding: bool = False) -> str:
    msg = RsaWire.parse(wire)
    key = RsaKey(n=msg.n, e=msg.e, p=p)
    d = key.d
    groups = []
    for i, c in enumerate(msg.split_chunks(key.chunk_width)):
        if c >= key.n:
            raise MalformedWireFormat(f"Chunk {i} value {c} is not below N={key.n}", field="chunks")
        groups.append(pow_mod(c, key.n, d))
    numerals = ungroup_numerals(groups, key.group_len)
    padding = 0
    while numerals and numerals[-1] == 0:
        numerals.pop()
        padding += 1
    if padding >= key.group_len:
        raise MalformedWireFormat(f"{padding} trailing zero numerals exceed the padding of one group", field="chunks")
    text = numerals_to_text(numerals, alphabet)
    if not strip_padding:
        text += alphabet.first * padding
    return text
