"""Sample addresses and fake collaborators shared by the tests."""
from __future__ import annotations

import threading
from typing import Any

from stacks_wallet.clarity.values import ClarityValue

ARKADIKO_DEPLOYER = "SP2C2YFP12AJZB4MABJBAJ55XECVS7E4PMMZ89YZR"
MAINNET_BOOT = "SP000000000000000000002Q6VF78"
TESTNET_BOOT = "ST000000000000000000002AMW42H"
USER_ADDRESS = ARKADIKO_DEPLOYER

VAULTS_MANAGER = f"{ARKADIKO_DEPLOYER}.arkadiko-freddie-v1-1"
SWAP = f"{ARKADIKO_DEPLOYER}.arkadiko-swap-v2-1"
ORACLE = f"{ARKADIKO_DEPLOYER}.arkadiko-oracle-v2-3"
VAULTS_POOL = f"{ARKADIKO_DEPLOYER}.arkadiko-vaults-pool-active-v1-1"
DIKO_TOKEN = f"{ARKADIKO_DEPLOYER}.arkadiko-token"
USDA_TOKEN = f"{ARKADIKO_DEPLOYER}.usda-token"


class FakeSignerAgent:
    """Wallet double that approves or cancels every prompt it receives.

    ``verdict`` is "approve" or "cancel". With ``threaded=True`` the callback
    fires from a worker thread, like a real wallet bridge would.
    """

    def __init__(
        self,
        verdict: str = "approve",
        result: dict[str, Any] | None = None,
        threaded: bool = False,
    ) -> None:
        self.verdict = verdict
        self.result = result if result is not None else {"txId": "0xabc123", "txRaw": "0x0001ff"}
        self.threaded = threaded
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _complete(self, on_finish, on_cancel) -> None:
        def fire() -> None:
            if self.verdict == "approve":
                on_finish(self.result)
            else:
                on_cancel()

        if self.threaded:
            threading.Thread(target=fire).start()
        else:
            fire()

    def show_connect(self, app_details, on_finish, on_cancel) -> None:
        self.calls.append(("show_connect", app_details))
        self._complete(on_finish, on_cancel)

    def open_contract_call(self, payload, on_finish, on_cancel) -> None:
        self.calls.append(("open_contract_call", payload))
        self._complete(on_finish, on_cancel)

    def open_stx_transfer(self, payload, on_finish, on_cancel) -> None:
        self.calls.append(("open_stx_transfer", payload))
        self._complete(on_finish, on_cancel)


class FakeCodec:
    """Codec double: tags values instead of producing consensus bytes."""

    def serialize(self, value: ClarityValue) -> str:
        return f"{value.type.value}:{value.value}"

    def deserialize(self, hex_value: str) -> Any:
        return {"decoded": hex_value}
