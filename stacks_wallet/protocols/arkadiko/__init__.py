from .flows import ArkadikoProtocol

__all__ = ["ArkadikoProtocol"]
