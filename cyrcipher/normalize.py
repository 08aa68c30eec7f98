from .params import CYRILLIC, Alphabet

def prepare_text(text: str, alphabet: Alphabet = CYRILLIC) -> str:
    """Fold Ё into Е, uppercase, and keep only the alphabet's base letters."""
    text = text.replace("ё", "Е").replace("Ё", "Е").upper()
    return "".join(ch for ch in text if ch in alphabet.letters)
