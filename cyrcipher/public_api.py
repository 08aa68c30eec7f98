# cyrcipher/public_api.py
import sys
from typing import Optional
from .params import bcolors, RSA_MODULUS, RSA_EXPONENT, BAG_SEQUENCE, BAG_MULTIPLIER, BAG_GROUP_BITS
from .errors import KeystoreError
from .normalize import prepare_text
from .numerals import text_to_numerals
from .bits import text_to_bits, bits_to_string
from .serialization import BagWire, RsaWire, strip_trailing_newline, read_key_json, write_key_json
from .rsa_block import RsaKey, group_numerals, rsa_encode, rsa_decode
from .bag import text_to_sums, recover_sequence, bag_encode, bag_decode
from .keystore import store_key_in_keystore, retrieve_key_from_keystore

def trace(verbose: bool, label: str, value):
    """Intermediate state goes to stderr so stdout carries only the result."""
    if verbose:
        print(f"{bcolors.GREY}{label}: {value}{bcolors.ENDC}", file=sys.stderr)

def read_input(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return strip_trailing_newline(f.read())

def prepare_file(in_path: str) -> str:
    return prepare_text(read_input(in_path))

def encode_rsa_file(in_path: str, p: int, n: int = RSA_MODULUS, e: int = RSA_EXPONENT, verbose: bool = False) -> str:
    text = read_input(in_path)
    wire = rsa_encode(text, p, n, e)
    if verbose:
        key = RsaKey(n=n, e=e, p=p)
        trace(verbose, "parameters", f"N={key.n} p={key.p} q={key.q} phi={key.phi} E={key.e} group_len={key.group_len}")
        numerals = text_to_numerals(text)
        trace(verbose, "numerals", numerals)
        trace(verbose, "groups", group_numerals(numerals, key.group_len))
    return wire

def decode_rsa_file(in_path: str, p: int, strip_padding: bool = False, verbose: bool = False) -> str:
    wire = read_input(in_path)
    if verbose:
        msg = RsaWire.parse(wire)
        key = RsaKey(n=msg.n, e=msg.e, p=p)
        trace(verbose, "parameters", f"N={key.n} p={key.p} q={key.q} phi={key.phi} E={key.e} d={key.d}")
        trace(verbose, "chunks", msg.split_chunks(key.chunk_width))
    return rsa_decode(wire, p, strip_padding=strip_padding)

def encode_bag_file(in_path: str, n: int, sequence=BAG_SEQUENCE, e: int = BAG_MULTIPLIER, verbose: bool = False) -> str:
    text = read_input(in_path)
    wire = bag_encode(text, sequence, n, e)
    if verbose:
        trace(verbose, "parameters", f"seq={list(sequence)} N={n} E={e}")
        trace(verbose, "bits", bits_to_string(text_to_bits(text)))
        trace(verbose, "sums", text_to_sums(text, sequence))
    return wire

def decode_bag_file(in_path: str, n: int, verbose: bool = False) -> str:
    wire = read_input(in_path)
    if verbose:
        msg = BagWire.parse(wire, BAG_GROUP_BITS)
        trace(verbose, "parameters", f"N={n} E={msg.e}")
        trace(verbose, "recovered sequence", recover_sequence(msg, n))
        trace(verbose, "sums", msg.sums)
    return bag_decode(wire, n)

# -----------------------------
# Key files
# -----------------------------
def save_keypair(public: dict, private: dict, pubfile: str, privfile: Optional[str] = None, keystore: Optional[str] = None, passphrase: Optional[str] = None, key_name: Optional[str] = None) -> str:
    write_key_json(pubfile, public)
    if keystore and passphrase and key_name:
        store_key_in_keystore(passphrase, key_name, private, keystore)
        return f"Keys generated: {pubfile} (public), private stored in keystore"
    write_key_json(privfile, private)
    return f"Keys generated: {pubfile} (public), {privfile} (private)"

def load_private_key(privfile: Optional[str] = None, keystore: Optional[str] = None, passphrase: Optional[str] = None, key_name: Optional[str] = None) -> dict:
    if keystore:
        if not (passphrase and key_name):
            raise KeystoreError("Keystore access needs both a passphrase and a key name")
        return retrieve_key_from_keystore(passphrase, key_name, keystore)
    return read_key_json(privfile)
