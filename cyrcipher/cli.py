import sys
import argparse
from .params import bcolors, RSA_MODULUS, RSA_EXPONENT, BAG_SEQUENCE, BAG_MULTIPLIER
from .errors import CipherError
from .keystore import create_keystore
from .keygen import generate_rsa_key, generate_bag_key, rsa_key_to_dict, bag_key_to_dict
from .public_api import (
    prepare_file,
    encode_rsa_file, decode_rsa_file,
    encode_bag_file, decode_bag_file,
    save_keypair, load_private_key,
)

# -----------------------------
# Shared helpers
# -----------------------------
def fail(e: Exception) -> int:
    print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC} {e}", file=sys.stderr)
    return 1

def add_key_source(parser: argparse.ArgumentParser):
    parser.add_argument("--key", help="Private key JSON file")
    parser.add_argument("--keystore", help="Keystore filename holding the private key")
    parser.add_argument("--passphrase", help="Keystore passphrase")
    parser.add_argument("--key_name", help="Key name in keystore")

def key_from_args(args) -> dict:
    if not (args.key or args.keystore):
        return {}
    return load_private_key(args.key, args.keystore, args.passphrase, args.key_name)

def require(value, what: str):
    if value is None:
        raise ValueError(f"{what} is required (pass it on the command line or via --key/--keystore)")
    return value

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cyrcipher", description="RSA-like and knapsack ciphers over Cyrillic text")
    parser.add_argument("--verbose", action="store_true", help="Print intermediate state to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Subparser for text preparation
    prepare_parser = subparsers.add_parser("prepare", help="Uppercase, fold Ё into Е and drop foreign symbols")
    prepare_parser.add_argument("in_path", help="Input text file")

    # Subparser for RSA-like encoding
    rsa_enc_parser = subparsers.add_parser("rsa-encode", help="Encode with the RSA-like block cipher")
    rsa_enc_parser.add_argument("in_path", help="Prepared text file")
    rsa_enc_parser.add_argument("p", type=int, nargs="?", help="Prime factor p of N")
    rsa_enc_parser.add_argument("--modulus", type=int, help=f"Public modulus N (default {RSA_MODULUS})")
    rsa_enc_parser.add_argument("--exponent", type=int, help=f"Public exponent E (default {RSA_EXPONENT})")
    add_key_source(rsa_enc_parser)

    # Subparser for RSA-like decoding
    rsa_dec_parser = subparsers.add_parser("rsa-decode", help="Decode an RSA-like wire message")
    rsa_dec_parser.add_argument("in_path", help="Encoded message file")
    rsa_dec_parser.add_argument("p", type=int, nargs="?", help="Prime factor p of N")
    rsa_dec_parser.add_argument("--strip-padding", dest="strip_padding", action="store_true", help="Drop letters produced by group padding")
    add_key_source(rsa_dec_parser)

    # Subparser for knapsack encoding
    bag_enc_parser = subparsers.add_parser("bag-encode", help="Encode with the knapsack cipher")
    bag_enc_parser.add_argument("in_path", help="Prepared text file")
    bag_enc_parser.add_argument("n", type=int, nargs="?", help="Modulus N (greater than the sequence sum)")
    add_key_source(bag_enc_parser)

    # Subparser for knapsack decoding
    bag_dec_parser = subparsers.add_parser("bag-decode", help="Decode a knapsack wire message")
    bag_dec_parser.add_argument("in_path", help="Encoded message file")
    bag_dec_parser.add_argument("n", type=int, nargs="?", help="Modulus N used for encoding")
    add_key_source(bag_dec_parser)

    # Subparsers for key generation
    for name, bits_help in (("generate-rsa", "Modulus size in bits"), ("generate-bag", None)):
        gen_parser = subparsers.add_parser(name, help=f"Generate a {name.split('-')[1].upper()} keypair")
        if bits_help:
            gen_parser.add_argument("--bits", type=int, default=22, help=bits_help)
        gen_parser.add_argument("--pubfile", default=f"{name[9:]}_pub.json", help="Public key filename")
        gen_parser.add_argument("--privfile", default=f"{name[9:]}_priv.json", help="Private key filename")
        gen_parser.add_argument("--keystore", help="Keystore filename for private key")
        gen_parser.add_argument("--passphrase", help="Keystore passphrase")
        gen_parser.add_argument("--key_name", help="Key name in keystore")

    # Subparser for creating keystore
    create_keystore_parser = subparsers.add_parser("create-keystore", help="Create encrypted keystore")
    create_keystore_parser.add_argument("--passphrase", required=True, help="Keystore passphrase")
    create_keystore_parser.add_argument("--keystore_file", default="keystore.pkl", help="Keystore filename")
    return parser

def run(args) -> str:
    match args.command:
        case "prepare":
            return prepare_file(args.in_path)
        case "rsa-encode":
            key = key_from_args(args)
            p = require(args.p if args.p is not None else key.get("p"), "p")
            n = args.modulus or key.get("n", RSA_MODULUS)
            e = args.exponent or key.get("e", RSA_EXPONENT)
            return encode_rsa_file(args.in_path, int(p), int(n), int(e), verbose=args.verbose)
        case "rsa-decode":
            key = key_from_args(args)
            p = require(args.p if args.p is not None else key.get("p"), "p")
            return decode_rsa_file(args.in_path, int(p), strip_padding=args.strip_padding, verbose=args.verbose)
        case "bag-encode":
            key = key_from_args(args)
            n = require(args.n if args.n is not None else key.get("n"), "N")
            sequence = key.get("sequence", BAG_SEQUENCE)
            e = key.get("e", BAG_MULTIPLIER)
            return encode_bag_file(args.in_path, int(n), sequence, int(e), verbose=args.verbose)
        case "bag-decode":
            key = key_from_args(args)
            n = require(args.n if args.n is not None else key.get("n"), "N")
            return decode_bag_file(args.in_path, int(n), verbose=args.verbose)
        case "generate-rsa":
            key = generate_rsa_key(args.bits)
            return save_keypair({"n": key.n, "e": key.e}, rsa_key_to_dict(key),
                                args.pubfile, args.privfile, args.keystore, args.passphrase, args.key_name)
        case "generate-bag":
            key = generate_bag_key()
            public = {"n": key.n, "e": key.e, "public_sequence": key.public_sequence}
            return save_keypair(public, bag_key_to_dict(key),
                                args.pubfile, args.privfile, args.keystore, args.passphrase, args.key_name)
        case "create-keystore":
            create_keystore(args.passphrase, args.keystore_file)
            return f"Keystore created: {args.keystore_file}"

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        print(run(args))
    except (CipherError, OSError, ValueError, KeyError) as e:
        return fail(e)
    return 0

# -----------------------------
# Single-purpose programs: program <inputFilePath> <numericParameter>
# -----------------------------
COMPAT_PROGRAMS = {
    "rsa-encode": "code-text-rsa",
    "rsa-decode": "decode-text-rsa",
    "bag-encode": "code-text-bag",
    "bag-decode": "decode-text-bag",
}

def _compat(command: str, param: str, param_help: str, argv=None) -> int:
    parser = argparse.ArgumentParser(prog=COMPAT_PROGRAMS[command])
    parser.add_argument("in_path", help="Input file")
    parser.add_argument(param, type=int, help=param_help)
    args = parser.parse_args(argv)
    return main([command, args.in_path, str(getattr(args, param))])

def code_text_rsa(argv=None) -> int:
    return _compat("rsa-encode", "p", "Prime factor p of N", argv)

def decode_text_rsa(argv=None) -> int:
    return _compat("rsa-decode", "p", "Prime factor p of N", argv)

def code_text_bag(argv=None) -> int:
    return _compat("bag-encode", "n", "Modulus N", argv)

def decode_text_bag(argv=None) -> int:
    return _compat("bag-decode", "n", "Modulus N", argv)

def prepare_text_main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="prepare-text")
    parser.add_argument("in_path", help="Input file")
    args = parser.parse_args(argv)
    return main(["prepare", args.in_path])

if __name__ == "__main__":
    sys.exit(main())
