# cyrcipher/__init__.py
from .params import (
    Alphabet, CYRILLIC,
    RSA_MODULUS, RSA_EXPONENT,
    BAG_SEQUENCE, BAG_MULTIPLIER, BAG_GROUP_BITS, BAG_CODE_BITS,
)
from .errors import (
    CipherError, InvalidSymbol, NoModularInverse, KnapsackReconstructionFailed,
    MalformedWireFormat, InvalidKeyMaterial, KeystoreError,
)
from .numtheory import (
    pow_mod, egcd, mod_inverse, is_probable_prime, gen_prime, next_prime,
    is_superincreasing, generate_superincreasing_sequence,
)
from .numerals import letter_to_numeral, numeral_to_letter, text_to_numerals, numerals_to_text
from .bits import letter_to_code, code_to_letter, text_to_bits, bits_to_text, pad_bits
from .normalize import prepare_text
from .serialization import RsaWire, BagWire
from .rsa_block import RsaKey, group_numerals, ungroup_numerals, rsa_encode, rsa_decode
from .bag import BagKey, knapsack_sum, greedy_decompose, bag_encode, bag_decode
from .keygen import generate_rsa_key, generate_bag_key
from .keystore import create_keystore, load_keystore, store_key_in_keystore, retrieve_key_from_keystore
