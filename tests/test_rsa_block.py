import random
import pytest
from cyrcipher import (
    CYRILLIC, RSA_MODULUS, RSA_EXPONENT,
    InvalidSymbol, InvalidKeyMaterial, MalformedWireFormat, NoModularInverse,
    RsaKey, RsaWire, group_numerals, ungroup_numerals, rsa_encode, rsa_decode,
)

# 1873363 = 997 * 1879
P = 997
ALL_LETTERS = CYRILLIC.letters + CYRILLIC.extra

def test_key_derivation():
    key = RsaKey(n=RSA_MODULUS, e=RSA_EXPONENT, p=P)
    assert key.q == 1879
    assert key.phi == 996 * 1878
    assert key.group_len == 3
    assert key.chunk_width == 7
    assert (key.e * key.d) % key.phi == 1

@pytest.mark.parametrize("p", [1021, 1, 0, RSA_MODULUS])
def test_key_rejects_non_factor(p):
    with pytest.raises(InvalidKeyMaterial):
        RsaKey(n=RSA_MODULUS, e=RSA_EXPONENT, p=p)

def test_key_rejects_tiny_modulus():
    with pytest.raises(InvalidKeyMaterial):
        RsaKey(n=77, e=7, p=7)

def test_group_numerals_pads_with_zero_numerals():
    assert group_numerals([1], 3) == [10000]
    assert group_numerals([1, 2, 3, 33], 3) == [10203, 330000]
    assert group_numerals([], 3) == []

def test_ungroup_restores_leading_zero():
    assert ungroup_numerals([10000], 3) == [1, 0, 0]
    assert ungroup_numerals([10203, 330000], 3) == [1, 2, 3, 33, 0, 0]

def test_ungroup_rejects_wide_value():
    with pytest.raises(MalformedWireFormat):
        ungroup_numerals([1234567], 3)

def test_reference_single_letter():
    wire = rsa_encode("А", P)
    assert wire == "1873363;1427;0894200"
    assert wire.startswith("1873363;1427;")
    assert len(wire.split(";")[2]) == 7
    # two zero numerals of padding come back as the first letter
    assert rsa_decode(wire, P) == "ААА"
    assert rsa_decode(wire, P, strip_padding=True) == "А"

def test_reference_full_group():
    assert rsa_encode("АБВ", P) == "1873363;1427;1432718"
    assert rsa_encode("БВ", P) == "1873363;1427;0381754"

def test_trailing_newline_is_ignored():
    assert rsa_encode("АБВ\n", P) == rsa_encode("АБВ", P)
    assert rsa_decode("1873363;1427;1432718\n", P) == "АБВ"

@pytest.mark.parametrize("text", [
    "ПРИВЕТ",        # exactly two groups
    "ПРИВЕ",         # one numeral short of a boundary
    "ПРИВЕТМ",       # one numeral past a boundary
    "ЁЖИКЁ",
    "ЯЯЯЯЯЯЯЯЯ",
])
def test_round_trip_chunk_boundaries(text):
    wire = rsa_encode(text, P)
    chunks = wire.split(";")[2]
    assert len(chunks) == 7 * -(-len(text) // 3)
    assert rsa_decode(wire, P, strip_padding=True) == text
    decoded = rsa_decode(wire, P)
    assert decoded.startswith(text)
    assert set(decoded[len(text):]) <= {"А"}
    assert len(decoded) % 3 == 0

def test_round_trip_random_texts():
    rng = random.Random(1427)
    for _ in range(30):
        text = "".join(rng.choice(ALL_LETTERS) for _ in range(rng.randrange(1, 40)))
        assert rsa_decode(rsa_encode(text, P), P, strip_padding=True) == text

def test_strip_padding_keeps_real_first_letters():
    assert rsa_decode(rsa_encode("БАА", P), P, strip_padding=True) == "БАА"
    assert rsa_decode(rsa_encode("БА", P), P, strip_padding=True) == "БА"

def test_empty_text():
    wire = rsa_encode("", P)
    assert wire == "1873363;1427;"
    assert rsa_decode(wire, P) == ""

def test_round_trip_with_other_key():
    # 1009 * 1013 = 1022117, phi = 1020096
    text = "ШИФРОВАНИЕ"
    wire = rsa_encode(text, 1009, n=1022117, e=5)
    assert wire.startswith("1022117;5;")
    assert rsa_decode(wire, 1013, strip_padding=True) == text

def test_invalid_symbol():
    with pytest.raises(InvalidSymbol):
        rsa_encode("ПРИВЕТ МИР", P)
    with pytest.raises(InvalidSymbol):
        rsa_encode("hello", P)

def test_exponent_without_inverse():
    wire = rsa_encode("А", P, e=2)
    with pytest.raises(NoModularInverse):
        rsa_decode(wire, P)

def test_wrong_factor_is_rejected():
    wire = rsa_encode("А", P)
    with pytest.raises(InvalidKeyMaterial):
        rsa_decode(wire, 1021)

@pytest.mark.parametrize("wire", [
    "1873363;1427",
    "1873363;1427;0894200;",
    "N;1427;0894200",
    "1873363;-5;0894200",
    "1873363;1427;089420",
    "1873363;1427;08942a0",
    "1873363;1427;9999999",
])
def test_malformed_wire(wire):
    with pytest.raises(MalformedWireFormat):
        rsa_decode(wire, P)

def test_wire_parse_and_split():
    msg = RsaWire.parse("1873363;1427;08942001432718")
    assert (msg.n, msg.e) == (1873363, 1427)
    assert msg.split_chunks(7) == [894200, 1432718]
    assert msg.format() == "1873363;1427;08942001432718"

def test_key_rejects_phi_narrower_than_modulus():
    # 1067 = 11 * 97, phi = 960 has three digits against four for N
    with pytest.raises(InvalidKeyMaterial, match="fewer digits"):
        RsaKey(n=1067, e=7, p=11)
    for ch in CYRILLIC.letters:
        with pytest.raises(InvalidKeyMaterial):
            rsa_encode(ch, 11, n=1067, e=7)
