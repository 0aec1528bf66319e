"""Protocol interfaces for external collaborators."""
from .api import StacksApi
from .codec import ClarityCodec
from .signer import SignerAgent

__all__ = ["ClarityCodec", "SignerAgent", "StacksApi"]
