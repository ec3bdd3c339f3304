import dataclasses

import pytest

from exsdk.address import (
    acc_addr_prefix_convert,
    acc_address_from_bech32,
    acc_address_from_hex,
    acc_address_to_bech32,
    decode_bech32,
    encode_bech32,
    eth_address,
    eth_addresses,
    format_key_to_hash,
    get_config,
    is_valid_hex_address,
    to_cosmos_address,
    to_hex_address,
    val_addr_prefix_convert,
    val_address_from_bech32,
    val_address_to_bech32,
)
from exsdk.errors import SdkError

DEFAULT_ADDR = "ex1qj5c07sm6jetjz8f509qtrxgh4psxkv3ddyq7u"
DEFAULT_VAL_ADDR = "exvaloper1qj5c07sm6jetjz8f509qtrxgh4psxkv3m2wy6x"
ACC_ADDR_WITH_OKEXCHAIN_PREFIX = "okexchain1qj5c07sm6jetjz8f509qtrxgh4psxkv32x0qas"
VAL_ADDR_WITH_OKEXCHAIN_PREFIX = "okexchainvaloper1qj5c07sm6jetjz8f509qtrxgh4psxkv3tzllpj"


@pytest.fixture(autouse=True)
def restore_config():
    config = get_config()
    saved = dataclasses.replace(config)
    yield
    config.set_bech32_prefix_for_account(saved.account_prefix, saved.account_pubkey_prefix)
    config.set_bech32_prefix_for_validator(saved.validator_prefix, saved.validator_pubkey_prefix)


def test_acc_addr_prefix_convert():
    assert acc_addr_prefix_convert("ex", DEFAULT_ADDR, "okexchain") == ACC_ADDR_WITH_OKEXCHAIN_PREFIX

    with pytest.raises(SdkError):
        acc_addr_prefix_convert("exx", DEFAULT_ADDR, "okexchain")
    with pytest.raises(SdkError):
        acc_addr_prefix_convert("ex", DEFAULT_ADDR + "a", "okexchain")

    other = acc_addr_prefix_convert("ex", DEFAULT_ADDR, "okexchainx")
    assert other != ACC_ADDR_WITH_OKEXCHAIN_PREFIX
    assert other.startswith("okexchainx1")


def test_val_addr_prefix_convert():
    converted = val_addr_prefix_convert("exvaloper", DEFAULT_VAL_ADDR, "okexchainvaloper")
    assert converted == VAL_ADDR_WITH_OKEXCHAIN_PREFIX

    with pytest.raises(SdkError):
        val_addr_prefix_convert("exxvaloper", DEFAULT_VAL_ADDR, "okexchainvaloper")
    with pytest.raises(SdkError):
        val_addr_prefix_convert("exvaloper", DEFAULT_VAL_ADDR + "a", "okexchainvaloper")

    other = val_addr_prefix_convert("exvaloper", DEFAULT_VAL_ADDR, "okexchainxvaloper")
    assert other != VAL_ADDR_WITH_OKEXCHAIN_PREFIX


def test_prefix_convert_switches_config():
    acc_addr_prefix_convert("ex", DEFAULT_ADDR, "okexchain")
    config = get_config()
    assert config.account_prefix == "okexchain"
    assert config.account_pubkey_prefix == "okexchainpub"
    assert acc_address_from_bech32(ACC_ADDR_WITH_OKEXCHAIN_PREFIX) == bytes(
        decode_bech32(DEFAULT_ADDR)[1]
    )


def test_bech32_round_trip():
    payload = bytes(range(20))
    encoded = encode_bech32("ex", payload)
    assert decode_bech32(encoded) == ("ex", payload)
    assert decode_bech32(encoded.upper()) == ("ex", payload)


@pytest.mark.parametrize(
    "text", [DEFAULT_ADDR + "a", DEFAULT_ADDR[:-1] + "1", "Ex1qj5c07sm6jetjz8f509", "ex1b", ""]
)
def test_decode_bech32_rejects_bad_strings(text):
    with pytest.raises(SdkError):
        decode_bech32(text)


def test_acc_and_val_addresses_share_payload():
    acc = acc_address_from_bech32(DEFAULT_ADDR)
    val = val_address_from_bech32(DEFAULT_VAL_ADDR)
    assert acc == val
    assert len(acc) == 20
    assert acc_address_to_bech32(acc) == DEFAULT_ADDR
    assert val_address_to_bech32(val) == DEFAULT_VAL_ADDR


def test_from_bech32_checks_prefix_and_emptiness():
    with pytest.raises(SdkError):
        acc_address_from_bech32(DEFAULT_VAL_ADDR)
    with pytest.raises(SdkError):
        acc_address_from_bech32("   ")
    assert acc_address_to_bech32(b"") == ""


@pytest.mark.parametrize(
    "address, expected",
    [
        ("", False),
        ("0x", True),
        ("0xabCD", True),
        ("abcd", False),
        ("0xabc", False),
        ("0xzz", False),
    ],
)
def test_is_valid_hex_address(address, expected):
    assert is_valid_hex_address(address) is expected


def test_to_cosmos_address_accepts_both_forms():
    addr = acc_address_from_bech32(DEFAULT_ADDR)
    assert to_cosmos_address(DEFAULT_ADDR) == addr
    assert to_cosmos_address("0x" + addr.hex()) == addr
    assert to_cosmos_address(addr.hex()) == addr
    assert acc_address_from_hex(addr.hex()) == addr


def test_to_cosmos_address_errors():
    with pytest.raises(SdkError, match="invalid bech32 formatted address"):
        to_cosmos_address(DEFAULT_ADDR[:-1] + "1")
    with pytest.raises(SdkError):
        to_cosmos_address(DEFAULT_ADDR[1:])
    with pytest.raises(SdkError):
        acc_address_from_hex("")


def test_to_hex_address():
    addr = acc_address_from_bech32(DEFAULT_ADDR)
    assert to_hex_address(DEFAULT_ADDR) == addr
    assert to_hex_address("0x" + addr.hex().upper()) == addr
    with pytest.raises(SdkError, match="invalid hex address"):
        to_hex_address("0x1234")


def test_format_key_to_hash():
    hashed = format_key_to_hash("ab")
    assert hashed == "0x" + "0" * 62 + "ab"
    assert format_key_to_hash("0xab") == hashed
    assert format_key_to_hash("0x" + "11" * 40) == "0x" + "11" * 32


def test_eth_address_keeps_last_twenty_bytes():
    long_hex = "ff" * 4 + "01" * 20
    assert eth_address(long_hex) == bytes([1]) * 20
    assert eth_address("0x1") == bytes(19) + b"\x01"
    assert eth_addresses(["0x1", long_hex]) == [eth_address("0x1"), eth_address(long_hex)]
    assert eth_addresses([]) == []