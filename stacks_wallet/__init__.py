"""Stacks wallet helpers: connect a wallet, read contracts, submit transactions."""
from .clarity import (
    AssetIdentifier,
    ClarityType,
    ClarityValue,
    ContractIdentifier,
    decode,
    encode,
    parse_asset_id,
    parse_contract_id,
)
from .errors import (
    EncodingError,
    FormatError,
    InvalidRequestError,
    RangeError,
    RemoteError,
    StacksWalletError,
    UserCancelledError,
)
from .gateways import ReadOnlyGateway, SignerGateway
from .models import (
    ConnectionSession,
    Network,
    PostConditionMode,
    StxTransferRequest,
    TransactionOutcome,
    TransactionRequest,
)
from .postconditions import (
    AssetKind,
    FungibleComparator,
    NonFungibleComparator,
    PostCondition,
    build as build_post_condition,
)
from .transactions import build_request, build_stx_transfer

__all__ = [
    "AssetIdentifier",
    "AssetKind",
    "ClarityType",
    "ClarityValue",
    "ConnectionSession",
    "ContractIdentifier",
    "EncodingError",
    "FormatError",
    "FungibleComparator",
    "InvalidRequestError",
    "Network",
    "NonFungibleComparator",
    "PostCondition",
    "PostConditionMode",
    "RangeError",
    "ReadOnlyGateway",
    "RemoteError",
    "SignerGateway",
    "StacksWalletError",
    "StxTransferRequest",
    "TransactionOutcome",
    "TransactionRequest",
    "UserCancelledError",
    "build_post_condition",
    "build_request",
    "build_stx_transfer",
    "decode",
    "encode",
    "parse_asset_id",
    "parse_contract_id",
]
