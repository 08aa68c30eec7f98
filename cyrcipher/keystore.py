import pickle
import json
import secrets
from base64 import b64encode, b64decode
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes
from .errors import KeystoreError

KDF_ITERATIONS = 100000

# -----------------------------
# Key Management
# -----------------------------
def _fernet_for(passphrase: str, salt: bytes) -> Fernet:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=KDF_ITERATIONS,
    )
    return Fernet(b64encode(kdf.derive(passphrase.encode())))

def create_keystore(passphrase: str, keystore_file: str):
    salt = secrets.token_bytes(16)
    _fernet_for(passphrase, salt)
    keystore = {"salt": b64encode(salt).decode(), "keys": {}}
    with open(keystore_file, "wb") as kf:
        pickle.dump(keystore, kf)

def load_keystore(passphrase: str, keystore_file: str):
    with open(keystore_file, "rb") as kf:
        try:
            keystore = pickle.load(kf)
            salt = b64decode(keystore["salt"])
        except (pickle.UnpicklingError, EOFError, KeyError, TypeError, ValueError):
            raise KeystoreError(f"{keystore_file} is not a readable keystore") from None
    return keystore, _fernet_for(passphrase, salt)

def store_key_in_keystore(passphrase: str, key_name: str, key_data: dict, keystore_file: str):
    keystore, fernet = load_keystore(passphrase, keystore_file)
    encrypted_key = fernet.encrypt(json.dumps(key_data).encode()).decode()
    keystore["keys"][key_name] = encrypted_key
    with open(keystore_file, "wb") as kf:
        pickle.dump(keystore, kf)

def retrieve_key_from_keystore(passphrase: str, key_name: str, keystore_file: str) -> dict:
    keystore, fernet = load_keystore(passphrase, keystore_file)
    if key_name not in keystore["keys"]:
        raise KeystoreError(f"Key {key_name} not found in keystore")
    encrypted_key = keystore["keys"][key_name]
    try:
        decrypted_key = fernet.decrypt(encrypted_key.encode())
    except InvalidToken:
        raise KeystoreError("Failed to decrypt key. Wrong passphrase?") from None
    return json.loads(decrypted_key.decode())
