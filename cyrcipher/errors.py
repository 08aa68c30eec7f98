# cyrcipher/errors.py
class CipherError(ValueError):
    """Base class for every failure raised by the codecs."""

class InvalidSymbol(CipherError):
    def __init__(self, symbol, message: str = None):
        self.symbol = symbol
        super().__init__(message or f"Symbol {symbol!r} is outside the supported alphabet")

class NoModularInverse(CipherError):
    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"Modular inverse of {value} modulo {modulus} does not exist")

class KnapsackReconstructionFailed(CipherError):
    def __init__(self, message: str, group: int = None, residue: int = None):
        self.group = group
        self.residue = residue
        super().__init__(message)

class MalformedWireFormat(CipherError):
    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message)

class InvalidKeyMaterial(CipherError):
    pass

class KeystoreError(CipherError):
    pass
