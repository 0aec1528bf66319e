"""Generic DEX swap through the user's wallet."""
from __future__ import annotations

import logging

from ..clarity.principal import parse_contract_id
from ..clarity.values import contract_principal, uint
from ..gateways.signer import SignerGateway
from ..models import Network, TransactionOutcome
from ..postconditions import FungibleComparator, stx_condition
from ..transactions import build_request

logger = logging.getLogger(__name__)


async def swap_tokens(
    signer: SignerGateway,
    dex_contract: str,
    token_in: str,
    token_out: str,
    amount_in: int,
    min_amount_out: int,
    user_address: str,
    testnet: bool = False,
) -> TransactionOutcome:
    """Call ``swap`` on ``dex_contract``, capping the user's STX debit at ``amount_in``."""
    request = build_request(
        parse_contract_id(dex_contract),
        "swap",
        [
            contract_principal(token_in),
            contract_principal(token_out),
            uint(amount_in),
            uint(min_amount_out),
        ],
        [stx_condition(user_address, FungibleComparator.LESS_EQUAL, amount_in)],
        network=Network.from_flag(testnet),
    )
    outcome = await signer.submit(request)
    logger.info("Swap successful: %s", outcome.tx_id)
    return outcome
