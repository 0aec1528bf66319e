"""Total value locked: token balances summed across owner principals."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from .clarity.principal import parse_principal, strip_chain_prefix
from .errors import RemoteError
from .interfaces.api import StacksApi

logger = logging.getLogger(__name__)

STX_TOKEN = "STX"


def _balance(entry: object, owner: str, token: str) -> int:
    if not isinstance(entry, dict) or "balance" not in entry:
        raise RemoteError(f"Malformed {token} balance for {owner}")
    try:
        return int(entry["balance"])
    except (TypeError, ValueError) as e:
        raise RemoteError(f"Malformed {token} balance for {owner}: {entry['balance']!r}") from e


async def sum_tokens(
    api: StacksApi,
    owners: Iterable[str],
    blacklisted_tokens: Iterable[str] = (),
) -> dict[str, int]:
    """Sum raw balances held by ``owners``, keyed by token.

    STX is reported under ``"STX"`` in microSTX; fungible tokens under their
    asset id (``"address.contract::asset"``). Blacklisted ids may carry a
    ``stacks:`` prefix.

    Raises:
        FormatError: An owner is not a valid principal.
        RemoteError: A balance lookup failed or came back malformed.
    """
    owners = [str(parse_principal(owner)) for owner in owners]
    blacklist = {strip_chain_prefix(token) for token in blacklisted_tokens}

    totals: dict[str, int] = {}
    for owner in owners:
        data = await api.get_json(f"/extended/v1/address/{owner}/balances")
        if not isinstance(data, dict):
            raise RemoteError(f"Malformed balances response for {owner}")

        if STX_TOKEN not in blacklist and "stx" in data:
            totals[STX_TOKEN] = totals.get(STX_TOKEN, 0) + _balance(data["stx"], owner, STX_TOKEN)

        for token, entry in (data.get("fungible_tokens") or {}).items():
            if token in blacklist:
                continue
            amount = _balance(entry, owner, token)
            if amount:
                totals[token] = totals.get(token, 0) + amount

    logger.info("Summed %d tokens across %d owners", len(totals), len(owners))
    for token, amount in sorted(totals.items()):
        logger.debug("  %s: %d", token, amount)
    return totals
