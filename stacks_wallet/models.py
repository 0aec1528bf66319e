"""Immutable data models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .clarity.principal import ContractIdentifier
from .clarity.values import ClarityValue
from .postconditions import PostCondition


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

    @classmethod
    def from_flag(cls, testnet: bool) -> "Network":
        return cls.TESTNET if testnet else cls.MAINNET


class PostConditionMode(str, Enum):
    """DENY rejects any asset movement not covered by a post-condition."""

    DENY = "deny"
    ALLOW = "allow"


@dataclass(frozen=True)
class TransactionRequest:
    """A contract call waiting to be approved by the user's wallet."""

    network: Network
    contract: ContractIdentifier
    function_name: str
    args: tuple[ClarityValue, ...] = ()
    post_conditions: tuple[PostCondition, ...] = ()
    post_condition_mode: PostConditionMode = PostConditionMode.DENY


@dataclass(frozen=True)
class StxTransferRequest:
    """A native STX transfer waiting to be approved by the user's wallet."""

    network: Network
    recipient: str
    amount: int
    memo: str = ""


@dataclass(frozen=True)
class TransactionOutcome:
    """Broadcast transaction returned after the user approved it."""

    tx_id: str
    raw_tx: bytes


@dataclass(frozen=True)
class ConnectionSession:
    """Result of a successful wallet connection."""

    addresses: Mapping[Network, str]
    raw_profile: Mapping[str, Any] = field(default_factory=dict)

    def user_address(self, network: Network = Network.MAINNET) -> str:
        try:
            return self.addresses[network]
        except KeyError:
            raise KeyError(f"Wallet exposed no {network.value} address") from None
