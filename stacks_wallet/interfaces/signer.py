"""Signer agent protocol: the user's wallet.

The wallet reports completion through callbacks. ``on_finish`` receives the
wallet's result payload; ``on_cancel`` is called when the user declines.
Either callback may be invoked from any thread.
"""
from typing import Any, Callable, Protocol

FinishCallback = Callable[[dict[str, Any]], None]
CancelCallback = Callable[[], None]


class SignerAgent(Protocol):
    """Abstract interface for a user-controlled signing wallet."""

    def show_connect(
        self,
        app_details: dict[str, str],
        on_finish: FinishCallback,
        on_cancel: CancelCallback,
    ) -> None: ...

    def open_contract_call(
        self,
        payload: dict[str, Any],
        on_finish: FinishCallback,
        on_cancel: CancelCallback,
    ) -> None: ...

    def open_stx_transfer(
        self,
        payload: dict[str, Any],
        on_finish: FinishCallback,
        on_cancel: CancelCallback,
    ) -> None: ...
