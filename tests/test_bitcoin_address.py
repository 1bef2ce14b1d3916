import pytest

from b58_helpers import b58encode, checksum, make_address
from validkit.errors import InvalidBitcoinAddress
from validkit.validations.format import validate_bitcoin_address

GENESIS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"


def test_genesis_address_is_valid():
    assert validate_bitcoin_address(GENESIS) is None


def test_generated_mainnet_and_testnet(mainnet_address, testnet_address):
    assert mainnet_address.startswith("1")
    assert validate_bitcoin_address(mainnet_address) is None
    assert validate_bitcoin_address(testnet_address) is None


def test_leading_zero_bytes_are_repadded():
    # version 0x00 followed by two more zero bytes -> three leading '1's
    addr = make_address(0x00, b"\x00\x00" + bytes(range(1, 19)))
    assert addr.startswith("111")
    assert validate_bitcoin_address(addr) is None


@pytest.mark.parametrize("index", [21, 22, 23, 24])
def test_any_checksum_byte_mutation_fails(index):
    body = b"\x00" + bytes(range(20))
    payload = bytearray(body + checksum(body))
    payload[index] ^= 0x01
    err = validate_bitcoin_address(b58encode(bytes(payload)))
    assert isinstance(err, InvalidBitcoinAddress)
    assert err.reason == "checksum"


def test_last_character_changed_fails():
    err = validate_bitcoin_address(GENESIS[:-1] + "b")
    assert isinstance(err, InvalidBitcoinAddress)


@pytest.mark.parametrize("version", [0x01, 0x05, 0xC4])
def test_unknown_version_byte(version):
    addr = make_address(version)
    assert 26 <= len(addr) <= 35
    err = validate_bitcoin_address(addr)
    assert isinstance(err, InvalidBitcoinAddress)
    assert err.reason == "version"


def test_custom_versions():
    addr = make_address(0x05)
    assert validate_bitcoin_address(addr, versions=(0x05,)) is None
    assert validate_bitcoin_address(GENESIS, versions=(0x05,)).reason == "version"


@pytest.mark.parametrize("value", ["", "1", "1" * 25, GENESIS + "z" * 2, "x" * 36])
def test_length_precheck(value):
    err = validate_bitcoin_address(value)
    assert isinstance(err, InvalidBitcoinAddress)
    assert err.reason == "length"


def test_non_alphanumeric_rejected():
    assert validate_bitcoin_address(GENESIS[:10] + "-" + GENESIS[11:]).reason == "charset"
    assert validate_bitcoin_address(GENESIS[:10] + "é" + GENESIS[11:]).reason == "charset"


@pytest.mark.parametrize("bad", ["0", "O", "I", "l"])
def test_alphanumeric_outside_base58_alphabet(bad):
    err = validate_bitcoin_address(GENESIS[:5] + bad + GENESIS[6:])
    assert err.reason == "base58"


def test_all_zero_symbols_decode_to_wrong_length():
    assert validate_bitcoin_address("1" * 26).reason == "payload_length"


def test_every_failure_is_the_same_error_type():
    errors = [
        validate_bitcoin_address("1"),
        validate_bitcoin_address("0" * 30),
        validate_bitcoin_address(make_address(0x01)),
        validate_bitcoin_address(GENESIS[:-1] + "b"),
    ]
    assert all(type(e) is InvalidBitcoinAddress for e in errors)
    assert {str(e) for e in errors} == {"invalid Bitcoin address"}


def test_idempotent(mainnet_address):
    assert {validate_bitcoin_address(mainnet_address) for _ in range(3)} == {None}
