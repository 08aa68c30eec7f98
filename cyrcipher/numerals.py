from .params import CYRILLIC, Alphabet
from .errors import InvalidSymbol

# -----------------------------
# Letter <-> numeral (1..alphabet.size)
# -----------------------------
def letter_to_numeral(ch: str, alphabet: Alphabet = CYRILLIC) -> int:
    if alphabet.extra and ch == alphabet.extra:
        return alphabet.size
    idx = alphabet.letters.find(ch) if len(ch) == 1 else -1
    if idx < 0:
        raise InvalidSymbol(ch)
    return idx + 1

def numeral_to_letter(n: int, alphabet: Alphabet = CYRILLIC) -> str:
    if alphabet.extra and n == alphabet.size:
        return alphabet.extra
    if not 1 <= n <= len(alphabet.letters):
        raise InvalidSymbol(n, f"Numeral {n} is outside 1..{alphabet.size}")
    return alphabet.letters[n - 1]

def text_to_numerals(text: str, alphabet: Alphabet = CYRILLIC) -> list[int]:
    return [letter_to_numeral(ch, alphabet) for ch in text]

def numerals_to_text(numerals, alphabet: Alphabet = CYRILLIC) -> str:
    return "".join(numeral_to_letter(n, alphabet) for n in numerals)
