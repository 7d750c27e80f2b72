"""
Constants and configuration for the clipboard‑masker library.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.
"""

import os
from pathlib import Path


class _DontChangeMe:
    MAIN_ENV_PREFIX = "CLIPBOARD_MASKER_"


def bool_env_value(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Location of the persisted settings (JSON)
SETTINGS_FILE = Path(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}SETTINGS_FILE",
        str(Path.home() / ".config" / "clipboard-masker" / "settings.json"),
    ).strip()
).expanduser()

# Default logging level
LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()

# Optional logging file, empty means log to stderr only
LOG_FILE_NAME = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_FILENAME", ""
).strip()

# Maximum number of nested redirector unwraps
DEFAULT_HOP_LIMIT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}HOP_LIMIT", "2").strip()
)

# =============================================================================
# SERVER CONFIGURATION
# =============================================================================
# Default prefix for each endpoint
DEFAULT_API_PREFIX = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}EP_PREFIX", "/api"
).strip()

SERVER_HOST = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_HOST", "127.0.0.1"
).strip()

SERVER_PORT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_PORT", "8082").strip()
)

SERVER_DEBUG = bool_env_value(f"{_DontChangeMe.MAIN_ENV_PREFIX}DEBUG")

# Timeout (seconds) used by the HTTP client
CLIENT_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}CLIENT_TIMEOUT", "10").strip()
)
