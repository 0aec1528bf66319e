"""Principals: standard addresses, contract identifiers and asset ids."""
from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import FormatError
from .c32 import address_to_version_hash, version_hash_to_address

_CONTRACT_NAME_RE = re.compile(r"^[a-zA-Z]([a-zA-Z0-9]|[-_])*$")
_CONTRACT_NAME_MAX_LENGTH = 128
_CHAIN_PREFIX = "stacks:"


@dataclass(frozen=True)
class ContractIdentifier:
    """A deployed contract, written ``"address.name"``."""

    address: str
    name: str

    def __str__(self) -> str:
        return f"{self.address}.{self.name}"


@dataclass(frozen=True)
class AssetIdentifier:
    """A token defined by a contract, written ``"address.name::asset"``."""

    contract: ContractIdentifier
    asset_name: str

    def __str__(self) -> str:
        return f"{self.contract}::{self.asset_name}"


def validate_address(address: str) -> str:
    """Return the canonical form of a checksummed Stacks address.

    Lowercase characters after the leading ``S`` and the c32 lookalikes
    (``O``, ``I``, ``L``) are normalized, so equal addresses compare equal.

    Raises:
        FormatError: If the checksum or the encoding is wrong.
    """
    return version_hash_to_address(*address_to_version_hash(address))


def make_contract_id(address: str, name: str) -> ContractIdentifier:
    address = validate_address(address)
    if not name:
        raise FormatError(f"Contract name is empty for address {address}")
    if len(name) > _CONTRACT_NAME_MAX_LENGTH or not _CONTRACT_NAME_RE.match(name):
        raise FormatError(f"Invalid contract name: {name!r}")
    return ContractIdentifier(address=address, name=name)


def parse_contract_id(contract_id: str) -> ContractIdentifier:
    """Parse ``"address.name"``, splitting on the first ``.``.

    Examples:
        "SP2C2YFP12AJZB4MABJBAJ55XECVS7E4PMMZ89YZR.arkadiko-token"
    """
    if not isinstance(contract_id, str) or "." not in contract_id:
        raise FormatError(f"Contract identifier must be 'address.name': {contract_id!r}")
    address, name = contract_id.split(".", 1)
    return make_contract_id(address, name)


def parse_asset_id(asset_id: str) -> AssetIdentifier:
    """Parse ``"address.name::asset"``; a leading ``stacks:`` is dropped."""
    if not isinstance(asset_id, str) or "::" not in asset_id:
        raise FormatError(f"Asset identifier must be 'address.name::asset': {asset_id!r}")
    contract_part, asset_name = strip_chain_prefix(asset_id).split("::", 1)
    if not asset_name:
        raise FormatError(f"Asset name is empty in {asset_id!r}")
    return AssetIdentifier(contract=parse_contract_id(contract_part), asset_name=asset_name)


def parse_principal(principal: str | ContractIdentifier) -> str | ContractIdentifier:
    """Accept either a standard address or a contract identifier."""
    if isinstance(principal, ContractIdentifier):
        return principal
    if isinstance(principal, str) and "." in principal:
        return parse_contract_id(principal)
    return validate_address(principal)


def strip_chain_prefix(token_id: str) -> str:
    if token_id.startswith(_CHAIN_PREFIX):
        return token_id[len(_CHAIN_PREFIX):]
    return token_id
