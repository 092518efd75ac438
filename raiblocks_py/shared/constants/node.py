"""Node defaults used when the caller does not provide a value."""

DEFAULT_SCHEME: str = "http"
DEFAULT_HOST: str = "localhost"
DEFAULT_PORT: int = 7076

# This must match all accounts existing
ALL_ACCOUNTS: str = "xrb_1111111111111111111111111111111111111111111111111117353trpda"

DEFAULT_FRONTIERS_COUNT: int = 1048576
DEFAULT_CHAIN_COUNT: int = 4096
DEFAULT_HISTORY_COUNT: int = 4096

DEFAULT_KEEPALIVE_ADDRESS: str = "::ffff:192.168.1.1"
DEFAULT_KEEPALIVE_PORT: int = 7075

CHANGE_BLOCK_TYPE: str = "change"
