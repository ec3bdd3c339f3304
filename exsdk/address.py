"""Bech32 and hex address handling."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import SdkError

PREFIX_PUBLIC = "pub"
ADDR_LEN = 20
HASH_LEN = 32

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_BECH32_LEN = 90
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_HEX_PAIRS_PREFIX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


@dataclass
class AddressConfig:
    """Bech32 prefixes used when reading and writing addresses."""

    account_prefix: str = "ex"
    account_pubkey_prefix: str = "expub"
    validator_prefix: str = "exvaloper"
    validator_pubkey_prefix: str = "exvaloperpub"

    def set_bech32_prefix_for_account(self, account_prefix: str, pubkey_prefix: str) -> None:
        self.account_prefix = account_prefix
        self.account_pubkey_prefix = pubkey_prefix

    def set_bech32_prefix_for_validator(self, validator_prefix: str, pubkey_prefix: str) -> None:
        self.validator_prefix = validator_prefix
        self.validator_pubkey_prefix = pubkey_prefix


_config = AddressConfig()


def get_config() -> AddressConfig:
    """Return the process-wide address configuration."""
    return _config


def _polymod(values: Iterable[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value >> from_bits:
            raise SdkError("invalid data range")
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & max_value)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (acc << (to_bits - bits)) & max_value:
        raise SdkError("invalid padding in bech32 data")
    return out


def encode_bech32(hrp: str, payload: bytes) -> str:
    """Encode bytes as a bech32 string with the given human readable part."""
    data = _convert_bits(payload, 8, 5, pad=True)
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_CHARSET[d] for d in data + checksum)


def decode_bech32(text: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human readable part and payload."""
    if len(text) < 8 or len(text) > _MAX_BECH32_LEN:
        raise SdkError(f"invalid bech32 string length {len(text)}")
    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise SdkError("invalid character in bech32 string")
    if text.lower() != text and text.upper() != text:
        raise SdkError("bech32 string is not all lowercase or all uppercase")
    text = text.lower()
    sep = text.rfind("1")
    if sep < 1 or sep + 7 > len(text):
        raise SdkError(f"invalid index of separator: {sep}")
    hrp, data_part = text[:sep], text[sep + 1:]
    try:
        data = [_CHARSET.index(c) for c in data_part]
    except ValueError as exc:
        raise SdkError(f"invalid character in bech32 data: {data_part}") from exc
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise SdkError(f"checksum failed for bech32 string {text}")
    return hrp, bytes(_convert_bits(data[:-6], 5, 8, pad=False))


def _from_bech32(address: str, prefix: str, kind: str) -> bytes:
    if not address.strip():
        raise SdkError(f"empty {kind} address string is not allowed")
    hrp, payload = decode_bech32(address)
    if hrp != prefix:
        raise SdkError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    if not payload:
        raise SdkError("decoding Bech32 address failed: must provide an address")
    if len(payload) != ADDR_LEN:
        raise SdkError(f"incorrect address length {len(payload)}")
    return payload


def acc_address_from_bech32(address: str) -> bytes:
    """Decode an account address using the configured account prefix."""
    return _from_bech32(address, _config.account_prefix, "account")


def acc_address_to_bech32(addr: bytes) -> str:
    """Encode account address bytes with the configured account prefix."""
    return encode_bech32(_config.account_prefix, addr) if addr else ""


def val_address_from_bech32(address: str) -> bytes:
    """Decode a validator address using the configured validator prefix."""
    return _from_bech32(address, _config.validator_prefix, "validator")


def val_address_to_bech32(addr: bytes) -> str:
    """Encode validator address bytes with the configured validator prefix."""
    return encode_bech32(_config.validator_prefix, addr) if addr else ""


def acc_address_from_hex(text: str) -> bytes:
    """Decode an account address from a hex string without prefix."""
    if not text:
        raise SdkError("decoding hex address failed: must provide an address")
    if not _HEX_RE.fullmatch(text):
        raise SdkError(f"invalid hex address: {text}")
    return bytes.fromhex(text)


def acc_addr_prefix_convert(src_prefix: str, src_addr: str, dst_prefix: str) -> str:
    """Re-encode an account address under another prefix.

    The global configuration is switched to the destination prefix.
    """
    _config.set_bech32_prefix_for_account(src_prefix, src_prefix + PREFIX_PUBLIC)
    addr = acc_address_from_bech32(src_addr)
    _config.set_bech32_prefix_for_account(dst_prefix, dst_prefix + PREFIX_PUBLIC)
    return acc_address_to_bech32(addr)


def val_addr_prefix_convert(src_prefix: str, src_addr: str, dst_prefix: str) -> str:
    """Re-encode a validator address under another prefix.

    The global configuration is switched to the destination prefix.
    """
    _config.set_bech32_prefix_for_validator(src_prefix, src_prefix + PREFIX_PUBLIC)
    addr = val_address_from_bech32(src_addr)
    _config.set_bech32_prefix_for_validator(dst_prefix, dst_prefix + PREFIX_PUBLIC)
    return val_address_to_bech32(addr)


def is_valid_hex_address(address: str) -> bool:
    """True for a ``0x`` prefixed string of hex byte pairs."""
    return address.startswith("0x") and _HEX_RE.fullmatch(address[2:]) is not None


def _strip_0x(text: str) -> str:
    return text[2:] if text[:2] in ("0x", "0X") else text


def _from_hex_lenient(text: str) -> bytes:
    text = _strip_0x(text)
    if len(text) % 2:
        text = "0" + text
    valid = _HEX_PAIRS_PREFIX_RE.match(text).group()
    return bytes.fromhex(valid)


def _fit(data: bytes, length: int) -> bytes:
    return data[-length:].rjust(length, b"\0")


def _is_hex_address(text: str) -> bool:
    text = _strip_0x(text)
    return len(text) == 2 * ADDR_LEN and _HEX_RE.fullmatch(text) is not None


def to_cosmos_address(address: str) -> bytes:
    """Read a bech32 or hex account address into address bytes."""
    if address.startswith(_config.account_prefix):
        try:
            return acc_address_from_bech32(address)
        except SdkError as exc:
            raise SdkError(f"failed. invalid bech32 formatted address: {exc}") from exc
    return acc_address_from_hex(address.removeprefix("0x"))


def to_hex_address(address: str) -> bytes:
    """Read a bech32 or hex account address into a 20-byte address."""
    if address.startswith(_config.account_prefix):
        try:
            return _fit(acc_address_from_bech32(address), ADDR_LEN)
        except SdkError as exc:
            raise SdkError(f"failed. invalid bech32 formatted address: {exc}") from exc
    if not _is_hex_address(address):
        raise SdkError(f"failed. invalid hex address: {address}")
    return eth_address(address)


def format_key_to_hash(key: str) -> str:
    """Normalise a hex key into a ``0x`` prefixed 32-byte hash string."""
    if not key.startswith("0x"):
        key = "0x" + key
    return "0x" + _fit(_from_hex_lenient(key), HASH_LEN).hex()


def eth_address(text: str) -> bytes:
    """Read a hex string into a 20-byte address, keeping the last 20 bytes."""
    return _fit(_from_hex_lenient(text), ADDR_LEN)


def eth_addresses(texts: Iterable[str]) -> list[bytes]:
    """Read several hex strings into 20-byte addresses."""
    return [eth_address(text) for text in texts]