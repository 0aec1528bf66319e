"""Gateways to the wallet and to the Stacks API."""
from .read_only import ReadOnlyGateway
from .signer import InteractionState, SignerGateway, SignerInteraction

__all__ = ["InteractionState", "ReadOnlyGateway", "SignerGateway", "SignerInteraction"]
