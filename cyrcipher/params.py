from dataclasses import dataclass

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

# -----------------------------
# Alphabet
# -----------------------------
@dataclass(frozen=True)
class Alphabet:
    letters: str = "АБВГДЕЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
    extra: str = "Ё"  # numbered after the base letters

    def __post_init__(self):
        if not self.letters:
            raise ValueError("Alphabet needs at least one letter")
        if len(set(self.letters)) != len(self.letters):
            raise ValueError("Alphabet letters must be unique")
        if self.extra and (len(self.extra) != 1 or self.extra in self.letters):
            raise ValueError(f"Extra symbol {self.extra!r} must be a single letter outside the base letters")
        if self.size > 99:
            raise ValueError("Numerals are written as two decimal digits; at most 99 symbols")

    @property
    def size(self) -> int:
        return len(self.letters) + (1 if self.extra else 0)

    @property
    def first(self) -> str:
        return self.letters[0]

CYRILLIC = Alphabet()

# -----------------------------
# Reference key material
# -----------------------------
RSA_MODULUS = 1873363   # 997 * 1879
RSA_EXPONENT = 1427
NUMERAL_DIGITS = 2

BAG_GROUP_BITS = 16
BAG_CODE_BITS = 5
BAG_MULTIPLIER = 415238
BAG_SEQUENCE = (
    6, 11, 31, 53, 115, 232, 450, 913,
    1818, 3642, 7274, 14559, 29114, 58234, 116463, 232929,
)
