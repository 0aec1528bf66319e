"""Clarity typed values: native Python values mapped to contract-call arguments.

Values are immutable and compare structurally, so encoding the same input twice
yields equal results. Wire serialization is left to a ``ClarityCodec``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..errors import EncodingError, FormatError, RangeError
from .principal import ContractIdentifier, make_contract_id, parse_contract_id, validate_address

UINT_MAX = 2**128 - 1
INT_MIN = -(2**127)
INT_MAX = 2**127 - 1


class ClarityType(str, Enum):
    UINT = "uint"
    INT = "int"
    BUFFER = "buffer"
    STRING_ASCII = "string-ascii"
    STRING_UTF8 = "string-utf8"
    STANDARD_PRINCIPAL = "principal-standard"
    CONTRACT_PRINCIPAL = "principal-contract"


@dataclass(frozen=True)
class ClarityValue:
    """A tagged Clarity value."""

    type: ClarityType
    value: Union[int, bytes, str, ContractIdentifier]


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def as_integer(value: Any) -> int:
    # bool is an int subclass; True is not an amount
    if isinstance(value, bool):
        raise TypeError("Booleans are not Clarity integers")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            raise TypeError(f"Not an integer string: {value!r}") from None
    raise TypeError(f"Expected an integer, got {type(value).__name__}")


def _as_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Expected bytes or str, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def uint(value: int | str) -> ClarityValue:
    number = as_integer(value)
    if not 0 <= number <= UINT_MAX:
        raise RangeError(f"{number} is outside the uint128 range")
    return ClarityValue(ClarityType.UINT, number)


def int_(value: int | str) -> ClarityValue:
    number = as_integer(value)
    if not INT_MIN <= number <= INT_MAX:
        raise RangeError(f"{number} is outside the int128 range")
    return ClarityValue(ClarityType.INT, number)


def buffer(value: bytes | bytearray | memoryview | str) -> ClarityValue:
    return ClarityValue(ClarityType.BUFFER, _as_bytes(value))


def string_ascii(value: str) -> ClarityValue:
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    if not value.isascii():
        raise EncodingError(f"String contains non-ASCII characters: {value!r}")
    return ClarityValue(ClarityType.STRING_ASCII, value)


def string_utf8(value: str) -> ClarityValue:
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    return ClarityValue(ClarityType.STRING_UTF8, value)


def standard_principal(address: str) -> ClarityValue:
    if isinstance(address, str) and "." in address:
        raise FormatError(f"Expected a standard address, got contract id {address!r}")
    return ClarityValue(ClarityType.STANDARD_PRINCIPAL, validate_address(address))


def contract_principal(
    address: str | ContractIdentifier, name: str | None = None
) -> ClarityValue:
    """Build a contract principal from ``(address, name)`` or ``"address.name"``."""
    if isinstance(address, ContractIdentifier):
        contract = make_contract_id(address.address, address.name)
    elif name is None:
        contract = parse_contract_id(address)
    else:
        contract = make_contract_id(address, name)
    return ClarityValue(ClarityType.CONTRACT_PRINCIPAL, contract)


_CONSTRUCTORS = {
    ClarityType.UINT: uint,
    ClarityType.INT: int_,
    ClarityType.BUFFER: buffer,
    ClarityType.STRING_ASCII: string_ascii,
    ClarityType.STRING_UTF8: string_utf8,
    ClarityType.STANDARD_PRINCIPAL: standard_principal,
    ClarityType.CONTRACT_PRINCIPAL: contract_principal,
}


def encode(value: Any, kind: ClarityType | str) -> ClarityValue:
    """Encode a native value as the Clarity type named by ``kind``.

    Args:
        value: Native value. Contract principals also accept an
            ``(address, name)`` tuple.
        kind: A :class:`ClarityType` or its string value, e.g. ``"uint"``.

    Raises:
        RangeError: Integer outside the 128-bit range for ``kind``.
        EncodingError: Non-ASCII text for ``string-ascii``.
        FormatError: Malformed address or contract identifier.
    """
    kind = ClarityType(kind)
    if kind is ClarityType.CONTRACT_PRINCIPAL and isinstance(value, tuple):
        return contract_principal(*value)
    return _CONSTRUCTORS[kind](value)


def decode(cv: ClarityValue) -> int | bytes | str:
    """Map a ClarityValue back to its native Python value."""
    if cv.type is ClarityType.CONTRACT_PRINCIPAL:
        return str(cv.value)
    return cv.value  # type: ignore[return-value]


def to_json(cv: ClarityValue) -> dict[str, str]:
    """Structured form handed to the signer agent."""
    if cv.type is ClarityType.BUFFER:
        return {"type": cv.type.value, "value": cv.value.hex()}  # type: ignore[union-attr]
    return {"type": cv.type.value, "value": str(cv.value)}
