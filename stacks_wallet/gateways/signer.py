"""Signer gateway: hands requests to the user's wallet and awaits the verdict.

Each call opens one wallet interaction that moves
``IDLE -> AWAITING_USER -> APPROVED | CANCELLED``. Only the wallet decides
when the interaction ends; the gateway sets no timeout, keeps no queue and
never retries. A caller that wraps these coroutines in its own timeout must
treat expiry as "outcome unknown": the wallet may still broadcast.
"""
from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable

from ..clarity.values import to_json as clarity_to_json
from ..errors import RemoteError, UserCancelledError
from ..interfaces.signer import SignerAgent
from ..models import (
    ConnectionSession,
    Network,
    StxTransferRequest,
    TransactionOutcome,
    TransactionRequest,
)
from ..postconditions import to_json as post_condition_to_json

logger = logging.getLogger(__name__)

Opener = Callable[[Callable[[dict[str, Any]], None], Callable[[], None]], None]


class InteractionState(str, Enum):
    IDLE = "idle"
    AWAITING_USER = "awaiting-user"
    APPROVED = "approved"
    CANCELLED = "cancelled"


class SignerInteraction:
    """One pending wallet prompt, resolved by the wallet's callbacks."""

    def __init__(self, label: str, loop: asyncio.AbstractEventLoop) -> None:
        self.label = label
        self.state = InteractionState.IDLE
        self._loop = loop
        self._future: asyncio.Future[dict[str, Any]] = loop.create_future()

    def start(self, opener: Opener) -> None:
        """Open the wallet prompt. ``opener`` receives the two callbacks."""
        self.state = InteractionState.AWAITING_USER
        logger.debug("%s: awaiting user", self.label)
        try:
            opener(self._on_finish, self._on_cancel)
        except Exception:
            self.state = InteractionState.IDLE
            raise

    async def wait(self) -> dict[str, Any]:
        return await self._future

    # Callbacks may fire on a wallet thread; hop back onto the loop.

    def _on_finish(self, data: dict[str, Any]) -> None:
        self._loop.call_soon_threadsafe(self._settle, InteractionState.APPROVED, data)

    def _on_cancel(self) -> None:
        self._loop.call_soon_threadsafe(self._settle, InteractionState.CANCELLED, None)

    def _settle(self, state: InteractionState, data: dict[str, Any] | None) -> None:
        if self._future.done():
            logger.warning(
                "%s: ignoring %s signal, interaction already %s",
                self.label,
                state.value,
                self.state.value,
            )
            return

        self.state = state
        logger.debug("%s: %s", self.label, state.value)
        if state is InteractionState.APPROVED:
            self._future.set_result(data or {})
        else:
            self._future.set_exception(UserCancelledError(f"User cancelled {self.label}"))


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


def contract_call_payload(request: TransactionRequest) -> dict[str, Any]:
    return {
        "network": request.network.value,
        "contractAddress": request.contract.address,
        "contractName": request.contract.name,
        "functionName": request.function_name,
        "functionArgs": [clarity_to_json(arg) for arg in request.args],
        "postConditions": [post_condition_to_json(pc) for pc in request.post_conditions],
        "postConditionMode": request.post_condition_mode.value,
    }


def stx_transfer_payload(request: StxTransferRequest) -> dict[str, Any]:
    return {
        "network": request.network.value,
        "recipient": request.recipient,
        "amount": str(request.amount),
        "memo": request.memo,
    }


def _parse_outcome(data: Any, label: str) -> TransactionOutcome:
    if not isinstance(data, dict):
        raise RemoteError(f"Wallet approved {label} but returned {type(data).__name__}")
    tx_id = data.get("txId")
    raw = data.get("txRaw")
    if not isinstance(tx_id, str) or not tx_id:
        raise RemoteError(f"Wallet approved {label} but returned no txId")
    if isinstance(raw, (bytes, bytearray)):
        raw_tx = bytes(raw)
    elif isinstance(raw, str):
        try:
            raw_tx = bytes.fromhex(raw[2:] if raw.startswith("0x") else raw)
        except ValueError as e:
            raise RemoteError(f"Wallet returned malformed txRaw for {label}") from e
    else:
        raise RemoteError(f"Wallet approved {label} but returned no txRaw")
    return TransactionOutcome(tx_id=tx_id, raw_tx=raw_tx)


def _parse_session(data: Any) -> ConnectionSession:
    profile = data.get("profile") if isinstance(data, dict) else None
    stx_address = profile.get("stxAddress") if isinstance(profile, dict) else None
    if not isinstance(stx_address, dict):
        raise RemoteError("Wallet connected but returned no stxAddress map")
    addresses = {
        network: stx_address[network.value]
        for network in Network
        if isinstance(stx_address.get(network.value), str) and stx_address[network.value]
    }
    if not addresses:
        raise RemoteError("Wallet connected but exposed no STX address")
    return ConnectionSession(addresses=addresses, raw_profile=data)


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------


class SignerGateway:
    """Async front door to a callback-driven :class:`SignerAgent`."""

    def __init__(self, agent: SignerAgent) -> None:
        self._agent = agent

    async def _interact(
        self,
        label: str,
        opener: Opener,
    ) -> Any:
        interaction = SignerInteraction(label, asyncio.get_running_loop())
        interaction.start(opener)
        try:
            return await interaction.wait()
        except UserCancelledError:
            logger.info("%s cancelled by user", label)
            raise

    async def connect_wallet(
        self,
        app_name: str = "DefiLlama Adapter",
        app_icon_url: str = "https://defillama.com/favicon.ico",
    ) -> ConnectionSession:
        """Ask the wallet to connect and return the user's addresses.

        Raises:
            UserCancelledError: The user closed the connect prompt.
            RemoteError: The wallet reported no STX address.
        """
        app_details = {"name": app_name, "icon": app_icon_url}
        data = await self._interact(
            "wallet connection",
            lambda on_finish, on_cancel: self._agent.show_connect(
                app_details, on_finish, on_cancel
            ),
        )
        try:
            session = _parse_session(data)
        except RemoteError as e:
            logger.warning("Wallet connection unusable: %s", e)
            raise
        logger.info("Wallet connected: %s", ", ".join(session.addresses.values()))
        return session

    async def submit(self, request: TransactionRequest) -> TransactionOutcome:
        """Send a contract call to the wallet and wait for approval.

        Raises:
            UserCancelledError: The user rejected the transaction.
            RemoteError: The wallet approved but returned an unusable result.
        """
        label = f"contract call {request.contract}.{request.function_name}"
        payload = contract_call_payload(request)
        data = await self._interact(
            label,
            lambda on_finish, on_cancel: self._agent.open_contract_call(
                payload, on_finish, on_cancel
            ),
        )
        try:
            outcome = _parse_outcome(data, label)
        except RemoteError as e:
            logger.warning("%s unusable: %s", label, e)
            raise
        logger.info("%s broadcast: %s", label, outcome.tx_id)
        return outcome

    async def transfer_stx(self, request: StxTransferRequest) -> TransactionOutcome:
        """Send an STX transfer to the wallet and wait for approval."""
        label = f"STX transfer of {request.amount} to {request.recipient}"
        payload = stx_transfer_payload(request)
        data = await self._interact(
            label,
            lambda on_finish, on_cancel: self._agent.open_stx_transfer(
                payload, on_finish, on_cancel
            ),
        )
        try:
            outcome = _parse_outcome(data, label)
        except RemoteError as e:
            logger.warning("%s unusable: %s", label, e)
            raise
        logger.info("%s broadcast: %s", label, outcome.tx_id)
        return outcome
