"""Protocol-specific wallet flows."""
from .arkadiko import ArkadikoProtocol
from .dex import swap_tokens

__all__ = ["ArkadikoProtocol", "swap_tokens"]
