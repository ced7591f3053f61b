"""Typed async client for the Bitcoin Core JSON-RPC interface."""

from .client import Client
from .config import Config
from .errors import (
    AuthError,
    BitcoinRpcClientError,
    BitcoinRpcError,
    ConnectionError,
    RPCErrorCode,
    UnknownError,
)
from .rpc import NULL, RPCClient

__all__ = [
    "NULL",
    "AuthError",
    "BitcoinRpcClientError",
    "BitcoinRpcError",
    "Client",
    "Config",
    "ConnectionError",
    "RPCClient",
    "RPCErrorCode",
    "UnknownError",
]

__version__ = "0.1.0"
