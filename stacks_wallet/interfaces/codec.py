"""Clarity codec protocol: the chain's binary value serialization."""
from typing import Any, Protocol

from ..clarity.values import ClarityValue


class ClarityCodec(Protocol):
    """Serializes arguments for, and decodes results of, read-only calls."""

    def serialize(self, value: ClarityValue) -> str:
        """Return the hex-encoded consensus serialization of ``value``."""
        ...

    def deserialize(self, hex_value: str) -> Any:
        """Decode a hex-encoded Clarity value returned by the node."""
        ...
