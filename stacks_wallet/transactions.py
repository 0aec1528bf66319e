"""Request builders: turn a call intent into a request for the signer. No I/O."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from .clarity.principal import ContractIdentifier, parse_contract_id, parse_principal
from .clarity.values import ClarityValue, uint
from .errors import InvalidRequestError
from .models import Network, PostConditionMode, StxTransferRequest, TransactionRequest
from .postconditions import PostCondition

logger = logging.getLogger(__name__)


def build_request(
    contract: ContractIdentifier | str,
    function_name: str,
    args: Iterable[ClarityValue] = (),
    post_conditions: Iterable[PostCondition] = (),
    network: Network = Network.MAINNET,
    mode: PostConditionMode = PostConditionMode.DENY,
    arity: int | None = None,
) -> TransactionRequest:
    """Assemble a contract-call request.

    Args:
        contract: Target contract, as an identifier or ``"address.name"``.
        function_name: Public function to call.
        args: Encoded arguments, in order.
        post_conditions: Asset bounds enforced by the chain. Duplicates are
            dropped, order is kept.
        network: Defaults to mainnet.
        mode: Defaults to DENY.
        arity: Expected argument count, when the function signature is known.
            Otherwise the node validates the arguments.

    Raises:
        InvalidRequestError: Empty function name or argument-count mismatch.
        TypeError: An argument is not a ClarityValue.
        FormatError: Malformed contract identifier.
    """
    if not isinstance(contract, ContractIdentifier):
        contract = parse_contract_id(contract)

    if not function_name or not function_name.strip():
        raise InvalidRequestError("Function name must not be empty")

    args = tuple(args)
    for index, arg in enumerate(args):
        if not isinstance(arg, ClarityValue):
            raise TypeError(
                f"Argument {index} of {function_name} is {type(arg).__name__}, "
                "expected ClarityValue"
            )

    if arity is not None and len(args) != arity:
        raise InvalidRequestError(
            f"{contract}.{function_name} takes {arity} arguments, got {len(args)}"
        )

    conditions = tuple(dict.fromkeys(post_conditions))
    for condition in conditions:
        if not isinstance(condition, PostCondition):
            raise TypeError(f"Expected PostCondition, got {type(condition).__name__}")

    mode = PostConditionMode(mode)
    if mode is PostConditionMode.ALLOW:
        logger.warning(
            "Building %s.%s with post-condition mode ALLOW; unlisted transfers "
            "will not be rejected",
            contract,
            function_name,
        )

    return TransactionRequest(
        network=Network(network),
        contract=contract,
        function_name=function_name,
        args=args,
        post_conditions=conditions,
        post_condition_mode=mode,
    )


def build_stx_transfer(
    recipient: str | ContractIdentifier,
    amount: int | str,
    memo: str = "",
    network: Network = Network.MAINNET,
) -> StxTransferRequest:
    """Assemble a native STX transfer request. ``amount`` is in microSTX."""
    recipient = parse_principal(recipient)
    return StxTransferRequest(
        network=Network(network),
        recipient=str(recipient),
        amount=uint(amount).value,  # type: ignore[arg-type]
        memo=memo,
    )
