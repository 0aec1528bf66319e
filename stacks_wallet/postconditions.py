"""Post-condition builder: declarative bounds on asset movements.

Post-conditions travel with a transaction request and are enforced by the
chain against the actual post-execution state. Combined with
``PostConditionMode.DENY`` they abort any transaction whose asset movements
are not covered by an explicit condition.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .clarity.principal import (
    AssetIdentifier,
    ContractIdentifier,
    parse_asset_id,
    parse_principal,
)
from .clarity.values import UINT_MAX, ClarityValue, as_integer
from .clarity.values import to_json as clarity_to_json
from .errors import RangeError

Principal = Union[str, ContractIdentifier]


class AssetKind(str, Enum):
    STX = "stx"
    FUNGIBLE = "ft"
    NON_FUNGIBLE = "nft"


class FungibleComparator(str, Enum):
    EQUAL = "eq"
    GREATER = "gt"
    GREATER_EQUAL = "gte"
    LESS = "lt"
    LESS_EQUAL = "lte"


class NonFungibleComparator(str, Enum):
    SENT = "sent"
    NOT_SENT = "not-sent"


@dataclass(frozen=True)
class PostCondition:
    """A single asset-movement assertion for ``principal``."""

    principal: Principal
    asset_kind: AssetKind
    comparator: Union[FungibleComparator, NonFungibleComparator]
    amount: int | None = None
    asset: AssetIdentifier | None = None
    asset_instance: ClarityValue | None = None


def _check_amount(amount: Any) -> int:
    number = as_integer(amount)
    if not 0 <= number <= UINT_MAX:
        raise RangeError(f"Post-condition amount {number} must be a non-negative uint")
    return number


def _as_asset(asset: AssetIdentifier | str | None) -> AssetIdentifier:
    if asset is None:
        raise ValueError("Token post-conditions require an asset identifier")
    if isinstance(asset, AssetIdentifier):
        return asset
    return parse_asset_id(asset)


def build(
    kind: AssetKind | str,
    principal: Principal,
    comparator: FungibleComparator | NonFungibleComparator | str,
    amount: int | str | None = None,
    asset: AssetIdentifier | str | None = None,
    asset_instance: ClarityValue | None = None,
) -> PostCondition:
    """Build a post-condition.

    Args:
        kind: STX, fungible or non-fungible.
        principal: Standard address or contract whose balance is bounded.
        comparator: For STX and fungible tokens a :class:`FungibleComparator`;
            for non-fungible tokens a :class:`NonFungibleComparator`.
        amount: Bound for STX and fungible kinds. Ignored for non-fungible.
        asset: Token for fungible and non-fungible kinds.
        asset_instance: The specific NFT, required for non-fungible kinds.

    Raises:
        RangeError: Negative or oversized amount.
        FormatError: Malformed principal or asset identifier.
        ValueError: Missing asset / instance or a comparator for the wrong kind.
    """
    kind = AssetKind(kind)
    principal = parse_principal(principal)

    if kind is AssetKind.NON_FUNGIBLE:
        if not isinstance(asset_instance, ClarityValue):
            raise ValueError("Non-fungible post-conditions require an asset instance")
        return PostCondition(
            principal=principal,
            asset_kind=kind,
            comparator=NonFungibleComparator(comparator),
            asset=_as_asset(asset),
            asset_instance=asset_instance,
        )

    if amount is None:
        raise ValueError(f"{kind.name} post-conditions require an amount")
    return PostCondition(
        principal=principal,
        asset_kind=kind,
        comparator=FungibleComparator(comparator),
        amount=_check_amount(amount),
        asset=_as_asset(asset) if kind is AssetKind.FUNGIBLE else None,
    )


def stx_condition(
    principal: Principal,
    comparator: FungibleComparator | str,
    amount: int | str,
) -> PostCondition:
    return build(AssetKind.STX, principal, comparator, amount)


def fungible_condition(
    principal: Principal,
    comparator: FungibleComparator | str,
    amount: int | str,
    asset: AssetIdentifier | str,
) -> PostCondition:
    return build(AssetKind.FUNGIBLE, principal, comparator, amount, asset=asset)


def non_fungible_condition(
    principal: Principal,
    comparator: NonFungibleComparator | str,
    asset: AssetIdentifier | str,
    asset_instance: ClarityValue,
) -> PostCondition:
    return build(
        AssetKind.NON_FUNGIBLE,
        principal,
        comparator,
        asset=asset,
        asset_instance=asset_instance,
    )


def bounds_debit(condition: PostCondition) -> bool:
    """True when ``condition`` caps how much the principal may send."""
    return condition.comparator in (
        FungibleComparator.LESS_EQUAL,
        FungibleComparator.EQUAL,
        FungibleComparator.LESS,
    )


def to_json(condition: PostCondition) -> dict[str, Any]:
    """Structured form handed to the signer agent."""
    payload: dict[str, Any] = {
        "type": f"{condition.asset_kind.value}-postcondition",
        "address": str(condition.principal),
        "condition": condition.comparator.value,
    }
    if condition.asset is not None:
        payload["asset"] = str(condition.asset)
    if condition.asset_kind is AssetKind.NON_FUNGIBLE:
        payload["assetId"] = clarity_to_json(condition.asset_instance)  # type: ignore[arg-type]
    else:
        payload["amount"] = str(condition.amount)
    return payload
