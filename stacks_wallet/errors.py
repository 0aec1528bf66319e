"""Exceptions raised by stacks_wallet."""
from __future__ import annotations


class StacksWalletError(Exception):
    """Base exception for stacks_wallet errors."""


class RangeError(StacksWalletError, ValueError):
    """Raised when an integer does not fit the Clarity integer width."""


class FormatError(StacksWalletError, ValueError):
    """Raised for malformed addresses, contract identifiers or asset ids."""


class EncodingError(StacksWalletError, ValueError):
    """Raised when a string cannot be represented in the requested encoding."""


class InvalidRequestError(StacksWalletError, ValueError):
    """Raised when a transaction request is not well formed."""


class UserCancelledError(StacksWalletError):
    """Raised when the user declines a wallet interaction."""


class RemoteError(StacksWalletError):
    """Raised when a remote service or the signer returns a failure."""

    def __init__(self, message: str, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)
