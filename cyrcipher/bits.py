import numpy as np
from .params import CYRILLIC, Alphabet, BAG_CODE_BITS
from .errors import InvalidSymbol

# -----------------------------
# Letter <-> 5-bit code, least significant bit first
# -----------------------------
CODE_MASK = (1 << BAG_CODE_BITS) - 1

def letter_to_code(ch: str, alphabet: Alphabet = CYRILLIC) -> int:
    idx = alphabet.letters.find(ch) if len(ch) == 1 else -1
    if idx < 0 or idx > CODE_MASK:
        raise InvalidSymbol(ch, f"Symbol {ch!r} has no {BAG_CODE_BITS}-bit code in the alphabet")
    return idx & CODE_MASK

def code_to_letter(value: int, alphabet: Alphabet = CYRILLIC) -> str:
    if not 0 <= value < min(len(alphabet.letters), CODE_MASK + 1):
        raise InvalidSymbol(value, f"Code {value} does not name a letter")
    return alphabet.letters[value]

def text_to_bits(text: str, alphabet: Alphabet = CYRILLIC) -> np.ndarray:
    codes = np.array([letter_to_code(ch, alphabet) for ch in text], dtype=np.uint8)
    shifts = np.arange(BAG_CODE_BITS, dtype=np.uint8)
    bits = (codes[:, None] >> shifts[None, :]) & 1
    return bits.reshape(-1).astype(np.uint8)

def pad_bits(bits: np.ndarray, multiple: int) -> np.ndarray:
    short = (-len(bits)) % multiple
    if short == 0:
        return np.asarray(bits, dtype=np.uint8)
    return np.concatenate([bits, np.zeros(short, dtype=np.uint8)]).astype(np.uint8)

def bits_to_text(bits, alphabet: Alphabet = CYRILLIC) -> str:
    bits = np.asarray(bits, dtype=np.uint8)
    usable = len(bits) - len(bits) % BAG_CODE_BITS
    groups = bits[:usable].reshape(-1, BAG_CODE_BITS).astype(np.int64)
    weights = 1 << np.arange(BAG_CODE_BITS, dtype=np.int64)
    codes = groups @ weights
    return "".join(code_to_letter(int(c), alphabet) for c in codes)

def bits_to_string(bits) -> str:
    return "".join(str(int(b)) for b in bits)
