"""c32check encoding for Stacks addresses: pure functions, no I/O.

A Stacks address is ``"S" + c32[version] + c32encode(hash160 + checksum)``
where ``checksum`` is the first four bytes of
``sha256(sha256(version_byte + hash160))``.
"""
from __future__ import annotations

import hashlib

from ..errors import FormatError

C32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

MAINNET_SINGLE_SIG = 22  # "P"
MAINNET_MULTI_SIG = 20  # "M"
TESTNET_SINGLE_SIG = 26  # "T"
TESTNET_MULTI_SIG = 21  # "N"

MAINNET_VERSIONS = frozenset({MAINNET_SINGLE_SIG, MAINNET_MULTI_SIG})
TESTNET_VERSIONS = frozenset({TESTNET_SINGLE_SIG, TESTNET_MULTI_SIG})

_HASH160_LENGTH = 20
_CHECKSUM_LENGTH = 4


def _normalize(text: str) -> str:
    """Apply the crockford-style substitutions c32 tolerates."""
    return text.upper().replace("O", "0").replace("L", "1").replace("I", "1")


def _checksum(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()[:_CHECKSUM_LENGTH]


def c32encode(data: bytes) -> str:
    """Encode bytes as c32, keeping one ``0`` per leading zero byte."""
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    number = int.from_bytes(data, "big")

    digits: list[str] = []
    while number > 0:
        number, remainder = divmod(number, 32)
        digits.append(C32_ALPHABET[remainder])

    return "0" * leading_zeros + "".join(reversed(digits))


def c32decode(text: str) -> bytes:
    """Decode a c32 string produced by :func:`c32encode`."""
    text = _normalize(text)
    number = 0
    for char in text:
        index = C32_ALPHABET.find(char)
        if index < 0:
            raise FormatError(f"Invalid c32 character {char!r}")
        number = number * 32 + index

    leading_zeros = len(text) - len(text.lstrip("0"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_zeros + body


def c32check_encode(version: int, data: bytes) -> str:
    if not 0 <= version < 32:
        raise FormatError(f"Invalid c32check version: {version}")
    checksum = _checksum(bytes([version]) + data)
    return C32_ALPHABET[version] + c32encode(data + checksum)


def c32check_decode(text: str) -> tuple[int, bytes]:
    """Return ``(version, data)`` after verifying the checksum."""
    text = _normalize(text)
    if len(text) < 2:
        raise FormatError("c32check string is too short")

    version = C32_ALPHABET.find(text[0])
    if version < 0:
        raise FormatError(f"Invalid c32check version character {text[0]!r}")

    raw = c32decode(text[1:])
    if len(raw) < _CHECKSUM_LENGTH:
        raise FormatError("c32check string is too short")

    data, checksum = raw[:-_CHECKSUM_LENGTH], raw[-_CHECKSUM_LENGTH:]
    if _checksum(bytes([version]) + data) != checksum:
        raise FormatError("c32check checksum mismatch")
    return version, data


def address_to_version_hash(address: str) -> tuple[int, bytes]:
    """Decode a Stacks address into ``(version, hash160)``.

    Raises:
        FormatError: If the address is not a checksummed Stacks address.
    """
    if not isinstance(address, str) or not address.startswith("S"):
        raise FormatError(f"Not a Stacks address: {address!r}")

    version, hash160 = c32check_decode(address[1:])
    if len(hash160) != _HASH160_LENGTH:
        raise FormatError(
            f"Address {address!r} decodes to {len(hash160)} bytes, expected 20"
        )
    return version, hash160


def version_hash_to_address(version: int, hash160: bytes) -> str:
    if len(hash160) != _HASH160_LENGTH:
        raise FormatError("hash160 must be 20 bytes")
    return "S" + c32check_encode(version, hash160)
