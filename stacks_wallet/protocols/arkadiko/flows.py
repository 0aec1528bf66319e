"""Arkadiko protocol: vaults, swaps and oracle reads through the user's wallet."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ...clarity.principal import ContractIdentifier, parse_contract_id
from ...clarity.values import contract_principal, standard_principal, string_ascii, uint
from ...config import ProtocolConfig
from ...gateways.read_only import ReadOnlyGateway
from ...gateways.signer import SignerGateway
from ...models import Network, TransactionOutcome
from ...postconditions import FungibleComparator, PostCondition, stx_condition
from ...transactions import build_request
from ...tvl import sum_tokens

logger = logging.getLogger(__name__)


class ArkadikoProtocol:
    """Wallet-driven flows for Arkadiko vaults and swaps on Stacks."""

    def __init__(
        self,
        signer: SignerGateway,
        reader: ReadOnlyGateway,
        config: ProtocolConfig,
        testnet: bool = False,
    ) -> None:
        self._signer = signer
        self._reader = reader
        self._config = config
        self._testnet = testnet
        self._network = Network.from_flag(testnet)

    @property
    def protocol_name(self) -> str:
        return "arkadiko"

    def _contract(self, key: str) -> ContractIdentifier:
        try:
            return parse_contract_id(self._config.contracts[key])
        except KeyError:
            raise KeyError(f"Arkadiko contract '{key}' is not configured") from None

    # ------------------------------------------------------------------
    # Read-only
    # ------------------------------------------------------------------

    async def get_user_vault(self, user_address: str, vault_id: int) -> Any:
        """Fetch vault ``vault_id`` from the vaults manager."""
        return await self._reader.query(
            self._contract("vaults_manager"),
            "get-vault-by-id",
            [uint(vault_id)],
            sender_address=user_address,
            testnet=self._testnet,
        )

    async def get_stx_price(self, sender_address: str) -> Any:
        """Fetch the STX price from the Arkadiko oracle."""
        return await self._reader.query(
            self._contract("oracle"),
            "get-price",
            [string_ascii("STX")],
            sender_address=sender_address,
            testnet=self._testnet,
        )

    async def tvl(self) -> dict[str, int]:
        """Token balances held by the vault pool and swap contracts."""
        return await sum_tokens(
            self._reader.client(self._testnet),
            self._config.tvl_owners,
            self._config.blacklisted_tokens,
        )

    # ------------------------------------------------------------------
    # Wallet flows
    # ------------------------------------------------------------------

    async def open_vault(
        self,
        collateral_amount: int,
        debt_amount: int,
        user_address: str,
        collateral_type: str = "STX-A",
    ) -> TransactionOutcome:
        """Deposit STX collateral and mint USDA against it.

        The user's STX debit is capped at ``collateral_amount``.
        """
        post_conditions = [
            stx_condition(user_address, FungibleComparator.LESS_EQUAL, collateral_amount),
        ]
        request = build_request(
            self._contract("vaults_manager"),
            "collateralize-and-mint",
            [
                uint(collateral_amount),
                uint(debt_amount),
                string_ascii(collateral_type),
                standard_principal(user_address),
            ],
            post_conditions,
            network=self._network,
            arity=4,
        )
        outcome = await self._signer.submit(request)
        logger.info("Vault opened: %s", outcome.tx_id)
        return outcome

    async def deposit_collateral(
        self, vault_id: int, amount: int, user_address: str
    ) -> TransactionOutcome:
        """Add exactly ``amount`` microSTX to an existing vault."""
        request = build_request(
            self._contract("vaults_manager"),
            "deposit",
            [uint(vault_id), uint(amount)],
            [stx_condition(user_address, FungibleComparator.EQUAL, amount)],
            network=self._network,
            arity=2,
        )
        outcome = await self._signer.submit(request)
        logger.info("Collateral deposited: %s", outcome.tx_id)
        return outcome

    async def swap_tokens(
        self,
        token_x: str,
        token_y: str,
        amount_in: int,
        min_amount_out: int,
        user_address: str,
        post_conditions: Iterable[PostCondition] = (),
    ) -> TransactionOutcome:
        """Swap ``amount_in`` of token X for at least ``min_amount_out`` of Y.

        The debited asset depends on the pair, so bounding conditions come from
        the caller. Without any, DENY mode makes the chain reject the swap
        rather than let tokens leave the wallet unchecked.
        """
        post_conditions = tuple(post_conditions)
        if not post_conditions:
            logger.warning(
                "Swap %s -> %s for %s has no post-conditions; the chain will "
                "reject any token transfer",
                token_x,
                token_y,
                user_address,
            )

        request = build_request(
            self._contract("swap"),
            "swap-x-for-y",
            [
                contract_principal(token_x),
                contract_principal(token_y),
                uint(amount_in),
                uint(min_amount_out),
            ],
            post_conditions,
            network=self._network,
            arity=4,
        )
        outcome = await self._signer.submit(request)
        logger.info("Swap executed: %s", outcome.tx_id)
        return outcome
