"""Read-only query gateway: evaluates contract functions without a signer."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..chains.stacks import StacksApiClient
from ..clarity.principal import ContractIdentifier, parse_contract_id, parse_principal
from ..clarity.values import ClarityValue
from ..config import AppConfig
from ..errors import RemoteError
from ..interfaces.api import StacksApi
from ..interfaces.codec import ClarityCodec
from ..models import Network

logger = logging.getLogger(__name__)


class ReadOnlyGateway:
    """Call read-only contract functions through the Stacks API."""

    def __init__(self, clients: Mapping[Network, StacksApi], codec: ClarityCodec) -> None:
        self._clients = dict(clients)
        self._codec = codec

    @classmethod
    def from_config(cls, config: AppConfig, codec: ClarityCodec) -> "ReadOnlyGateway":
        clients = {
            Network(name): StacksApiClient(network_cfg)
            for name, network_cfg in config.networks.items()
        }
        return cls(clients, codec)

    def client(self, testnet: bool = False) -> StacksApi:
        network = Network.from_flag(testnet)
        try:
            return self._clients[network]
        except KeyError:
            raise ValueError(f"No API client configured for {network.value}") from None

    async def query(
        self,
        contract: ContractIdentifier | str,
        function_name: str,
        args: Iterable[ClarityValue] = (),
        sender_address: str | None = None,
        testnet: bool = False,
    ) -> Any:
        """Evaluate ``contract.function_name(*args)`` as ``sender_address``.

        Returns:
            The decoded Clarity result.

        Raises:
            RemoteError: Transport failure, non-2xx status, malformed reply,
                or the node reporting that evaluation failed.
            FormatError: Malformed contract id or sender address.
        """
        if not isinstance(contract, ContractIdentifier):
            contract = parse_contract_id(contract)
        sender = str(parse_principal(sender_address or contract.address))

        body = {
            "sender": sender,
            "arguments": [self._codec.serialize(arg) for arg in args],
        }
        path = f"/v2/contracts/call-read/{contract.address}/{contract.name}/{function_name}"
        logger.debug("Read-only call %s.%s as %s", contract, function_name, sender)

        payload = await self.client(testnet).post_json(path, body)

        if not isinstance(payload, dict) or "okay" not in payload:
            raise RemoteError(f"Malformed read-only response for {contract}.{function_name}")
        if not payload["okay"]:
            cause = payload.get("cause", "unknown cause")
            logger.warning("Read-only call %s.%s failed: %s", contract, function_name, cause)
            raise RemoteError(f"Read-only call {contract}.{function_name} failed: {cause}")

        result = payload.get("result")
        if not isinstance(result, str):
            raise RemoteError(f"Read-only call {contract}.{function_name} returned no result")
        try:
            return self._codec.deserialize(result)
        except Exception as e:
            logger.warning(
                "Read-only call %s.%s returned an undecodable result: %s", contract, function_name, e
            )
            raise RemoteError(
                f"Malformed read-only result for {contract}.{function_name}"
            ) from e
