"""Custom exceptions used by the Dapr client helpers."""
from __future__ import annotations


class DaprClientError(Exception):
    """Base class for SDK specific exceptions."""


class ParseError(DaprClientError, ValueError):
    """Raised when an endpoint string cannot be parsed."""


class InvalidAddressError(ParseError):
    """Raised when an address matches none of the supported shapes."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Invalid address: {address}")
        self.address = address


class InvalidPortError(ParseError):
    """Raised when a port is not a base-10 integer in the TCP range."""

    def __init__(self, port: str) -> None:
        super().__init__(f"Invalid port: {port}")
        self.port = port


__all__ = [
    "DaprClientError",
    "ParseError",
    "InvalidAddressError",
    "InvalidPortError",
]
