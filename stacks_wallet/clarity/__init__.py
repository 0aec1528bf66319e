"""Clarity value encoding and principal parsing."""
from .principal import (
    AssetIdentifier,
    ContractIdentifier,
    parse_asset_id,
    parse_contract_id,
    parse_principal,
    validate_address,
)
from .values import (
    ClarityType,
    ClarityValue,
    buffer,
    contract_principal,
    decode,
    encode,
    int_,
    standard_principal,
    string_ascii,
    string_utf8,
    to_json,
    uint,
)

__all__ = [
    "AssetIdentifier",
    "ClarityType",
    "ClarityValue",
    "ContractIdentifier",
    "buffer",
    "contract_principal",
    "decode",
    "encode",
    "int_",
    "parse_asset_id",
    "parse_contract_id",
    "parse_principal",
    "standard_principal",
    "string_ascii",
    "string_utf8",
    "to_json",
    "uint",
    "validate_address",
]
