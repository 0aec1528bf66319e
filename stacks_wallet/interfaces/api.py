"""Stacks API protocol: HTTP access to a Stacks node / API service."""
from typing import Any, Protocol


class StacksApi(Protocol):
    """Abstract interface for JSON requests against a Stacks API."""

    async def get_json(self, path: str) -> Any: ...

    async def post_json(self, path: str, body: dict[str, Any]) -> Any: ...
