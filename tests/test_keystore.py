import pickle
import pytest
from cyrcipher import (
    KeystoreError, create_keystore, load_keystore, store_key_in_keystore, retrieve_key_from_keystore,
)

PASSPHRASE = "correct horse battery staple"

def test_store_and_retrieve(tmp_path):
    keystore_file = str(tmp_path / "keystore.pkl")
    create_keystore(PASSPHRASE, keystore_file)
    keystore, _ = load_keystore(PASSPHRASE, keystore_file)
    assert keystore["keys"] == {}
    key = {"n": 1873363, "e": 1427, "p": 997}
    store_key_in_keystore(PASSPHRASE, "rsa", key, keystore_file)
    assert retrieve_key_from_keystore(PASSPHRASE, "rsa", keystore_file) == key

def test_missing_key(tmp_path):
    keystore_file = str(tmp_path / "keystore.pkl")
    create_keystore(PASSPHRASE, keystore_file)
    with pytest.raises(KeystoreError, match="not found"):
        retrieve_key_from_keystore(PASSPHRASE, "nope", keystore_file)

def test_wrong_passphrase(tmp_path):
    keystore_file = str(tmp_path / "keystore.pkl")
    create_keystore(PASSPHRASE, keystore_file)
    store_key_in_keystore(PASSPHRASE, "bag", {"n": 1000003}, keystore_file)
    with pytest.raises(KeystoreError, match="Wrong passphrase"):
        retrieve_key_from_keystore("wrong", "bag", keystore_file)

@pytest.mark.parametrize("content", [b"not a keystore\n", b"", pickle.dumps([1, 2]), pickle.dumps({"keys": {}})])
def test_unreadable_keystore(tmp_path, content):
    keystore_file = tmp_path / "keystore.pkl"
    keystore_file.write_bytes(content)
    with pytest.raises(KeystoreError, match="not a readable keystore"):
        load_keystore(PASSPHRASE, str(keystore_file))
