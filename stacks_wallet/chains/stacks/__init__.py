from .client import StacksApiClient

__all__ = ["StacksApiClient"]
