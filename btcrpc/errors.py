"""Error taxonomy for the btcrpc client.

Every failed call surfaces as exactly one of ConnectionError, AuthError,
BitcoinRpcError or UnknownError. All four share BitcoinRpcClientError as a
base class.
"""

from enum import IntEnum
from typing import Union


# Taken from: https://github.com/bitcoin/bitcoin/blob/master/src/rpc/protocol.h
class RPCErrorCode(IntEnum):
    """Error codes reported by Bitcoin Core in the JSON-RPC ``error`` object."""

    # Standard JSON-RPC 2.0 errors
    RPC_INVALID_REQUEST = -32600
    RPC_METHOD_NOT_FOUND = -32601
    RPC_INVALID_PARAMS = -32602
    RPC_INTERNAL_ERROR = -32603
    RPC_PARSE_ERROR = -32700

    # General application defined errors
    RPC_MISC_ERROR = -1  # std::exception thrown in command handling
    RPC_TYPE_ERROR = -3  # Unexpected type was passed as parameter
    RPC_INVALID_ADDRESS_OR_KEY = -5
    RPC_OUT_OF_MEMORY = -7
    RPC_INVALID_PARAMETER = -8  # Invalid, missing or duplicate parameter
    RPC_DATABASE_ERROR = -20
    RPC_DESERIALIZATION_ERROR = -22  # Error parsing or validating structure in raw format
    RPC_VERIFY_ERROR = -25  # General error during transaction or block submission
    RPC_VERIFY_REJECTED = -26  # Rejected by network rules
    RPC_VERIFY_ALREADY_IN_CHAIN = -27
    RPC_IN_WARMUP = -28
    RPC_METHOD_DEPRECATED = -32

    # P2P client errors
    RPC_CLIENT_NOT_CONNECTED = -9
    RPC_CLIENT_IN_INITIAL_DOWNLOAD = -10
    RPC_CLIENT_NODE_ALREADY_ADDED = -23
    RPC_CLIENT_NODE_NOT_ADDED = -24
    RPC_CLIENT_NODE_NOT_CONNECTED = -29
    RPC_CLIENT_INVALID_IP_OR_SUBNET = -30
    RPC_CLIENT_P2P_DISABLED = -31

    # Chain errors
    RPC_CLIENT_MEMPOOL_DISABLED = -33

    # Wallet errors
    RPC_WALLET_ERROR = -4  # Unspecified problem with wallet (key not found etc.)
    RPC_WALLET_INSUFFICIENT_FUNDS = -6
    RPC_WALLET_INVALID_LABEL_NAME = -11
    RPC_WALLET_KEYPOOL_RAN_OUT = -12  # call keypoolrefill first
    RPC_WALLET_UNLOCK_NEEDED = -13  # call walletpassphrase first
    RPC_WALLET_PASSPHRASE_INCORRECT = -14
    RPC_WALLET_WRONG_ENC_STATE = -15  # e.g. encrypting an encrypted wallet
    RPC_WALLET_ENCRYPTION_FAILED = -16
    RPC_WALLET_ALREADY_UNLOCKED = -17
    RPC_WALLET_NOT_FOUND = -18  # Invalid wallet specified
    RPC_WALLET_NOT_SPECIFIED = -19  # Multiple wallets loaded, none selected


class BitcoinRpcClientError(Exception):
    """Base class for every error raised by the client."""


class ConnectionError(BitcoinRpcClientError):
    """Raised when the node endpoint cannot be reached at all."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthError(BitcoinRpcClientError):
    """Raised when the node rejects the supplied credentials (HTTP 401)."""

    def __init__(self):
        self.message = "Invalid credentials"
        super().__init__(self.message)


class BitcoinRpcError(BitcoinRpcClientError):
    """Raised when the node answers with a structured JSON-RPC error."""

    def __init__(self, code: Union[RPCErrorCode, int], message: str):
        """
        Initialize RPC error.

        Args:
            code: Error code from the response body. Known codes are
                  converted to RPCErrorCode, unknown ones stay plain ints.
            message: Error message from the response body, kept verbatim
        """
        try:
            code = RPCErrorCode(code)
        except ValueError:
            pass
        self.code = code
        self.message = message
        super().__init__(message)

    def __eq__(self, other):
        if not isinstance(other, BitcoinRpcError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self):
        return hash((int(self.code), self.message))

    def __repr__(self):
        return f"BitcoinRpcError(code={int(self.code)}, message={self.message!r})"


class UnknownError(BitcoinRpcClientError):
    """Raised for any other transport failure; keeps the original exception."""

    def __init__(self, original: BaseException):
        self.original = original
        self.message = str(original)
        super().__init__(self.message)
