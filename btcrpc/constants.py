"""Constants used throughout the btcrpc package."""

# JSON-RPC envelope
JSONRPC_VERSION = "2.0"
REQUEST_ID = 1  # Single-shot client, no pipelining or id correlation

# Default configuration values
DEFAULT_RPC_URL = "http://127.0.0.1:18443"  # regtest
DEFAULT_RPC_USER = ""
DEFAULT_RPC_PASSWORD = ""

# Log rotation defaults
DEFAULT_LOG_MAX_BYTES = 10_485_760  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 30

# Bitcoin RPC defaults
MAX_CONFIRMATIONS = 9_999_999  # Effectively unconfirmed + all confirmed
DEFAULT_CONF_TARGET = 10
DEFAULT_CHECK_LEVEL = 3
DEFAULT_NETWORK_HASHPS_BLOCKS = 120
DEFAULT_LIST_TRANSACTIONS_COUNT = 10

# Messages
CONNECTION_REFUSED_MESSAGE = "Connection to the provided address could not be established."
WALLET_PATH_PREFIX = "/wallet/"
