"""Shared runtime constants for the Ledger Pro client."""

DEFAULT_API_BASE_URL = "https://ameen-uncle-ledgerpro-backend.onrender.com"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_STATE_DIR = "/tmp/ledger_pro/state"
DEFAULT_LOG_LEVEL = "INFO"

# Single credential pair accepted by the login screen.
DEFAULT_AUTH_USERNAME = "ameen"
DEFAULT_AUTH_PASSWORD = "ameen@123"

AUTH_STATE_KEY = "ledger_auth"
LOCKED_ACCOUNTS_STATE_KEY = "ledger_locked_accounts"

ACCOUNTS_PATH = "/api/accounts"
TRANSACTIONS_PATH = "/api/transactions"
