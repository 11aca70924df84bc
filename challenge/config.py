"""
config.py - Configuration Management
=====================================
This module loads the challenge identity and API settings from environment
variables. It reads a .env file first and then builds a single immutable
Settings object that is passed into the runner.

Environment Variables Used:
---------------------------
- CHALLENGE_BASE_URL    : (Required) Base URL of the challenge API (e.g., "https://bfhldevapigw.healthrx.co.in/hiring")
- CHALLENGE_NAME        : (Required) Participant name sent during registration
- CHALLENGE_REG_NO      : (Required) Registration number (its last two digits pick the query)
- CHALLENGE_EMAIL       : (Required) Participant email sent during registration
- CHALLENGE_TIMEOUT_SEC : (Optional) Request timeout in seconds (default: 30)

Example .env file:
------------------
CHALLENGE_BASE_URL=https://bfhldevapigw.healthrx.co.in/hiring
CHALLENGE_NAME=John Doe
CHALLENGE_REG_NO=REG12347
CHALLENGE_EMAIL=john@example.com
"""

from dataclasses import dataclass
import os
from pathlib import Path
from dotenv import load_dotenv


DEFAULT_TIMEOUT_SEC = 30


# =============================================================================
# SETTINGS DATACLASSES
# =============================================================================

@dataclass(frozen=True)
class Identity:
    """The participant details submitted when requesting a webhook."""

    name: str
    reg_no: str
    email: str

    def to_payload(self) -> dict:
        # Field names expected by the /generateWebhook endpoint
        return {"name": self.name, "regNo": self.reg_no, "email": self.email}


@dataclass(frozen=True)
class Settings:
    """Container for all application configuration values."""

    # Required: The base URL of the API, without a trailing slash
    base_url: str

    # Required: Who we are registering as
    identity: Identity

    # Optional: How long to wait for each HTTP call before giving up
    timeout_sec: int = DEFAULT_TIMEOUT_SEC


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clean(v: str | None) -> str | None:
    """
    Clean and normalize an environment variable value.

    Examples:
        _clean('  hello  ')     -> 'hello'
        _clean('"quoted"')      -> 'quoted'
        _clean('')              -> None
        _clean(None)            -> None
    """
    if v is None:
        return None

    v = v.strip()

    if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
        v = v[1:-1].strip()

    return v if v else None


def _normalize_base_url(base: str) -> str:
    if not base.startswith("http"):
        base = "https://" + base
    return base.rstrip("/")


def _parse_timeout(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_TIMEOUT_SEC
    try:
        timeout = int(raw)
    except ValueError:
        raise RuntimeError(f"CHALLENGE_TIMEOUT_SEC must be an integer, got {raw!r}")
    if timeout <= 0:
        raise RuntimeError(f"CHALLENGE_TIMEOUT_SEC must be positive, got {timeout}")
    return timeout


# =============================================================================
# MAIN CONFIGURATION LOADER
# =============================================================================

def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load application configuration from environment variables.

    This function:
    1. Loads the .env file (project root by default, or ``env_file``)
    2. Reads all CHALLENGE_* environment variables
    3. Cleans and validates the values
    4. Returns a Settings object with all configuration

    Variables already present in the process environment win over the
    values in the .env file.

    Raises:
        RuntimeError: If a required variable is missing or the timeout is invalid
    """
    # ---------------------------------------------------------------------
    # STEP 1: Load the .env file
    # ---------------------------------------------------------------------
    # Default location is the project root (config.py -> challenge/ -> root)
    if env_file is None:
        env_file = Path(__file__).resolve().parents[1] / ".env"

    # load_dotenv never overrides variables already set in the process
    load_dotenv(dotenv_path=env_file)

    # ---------------------------------------------------------------------
    # STEP 2: Read and validate the required values
    # ---------------------------------------------------------------------
    values = {
        "CHALLENGE_BASE_URL": _clean(os.getenv("CHALLENGE_BASE_URL")),
        "CHALLENGE_NAME": _clean(os.getenv("CHALLENGE_NAME")),
        "CHALLENGE_REG_NO": _clean(os.getenv("CHALLENGE_REG_NO")),
        "CHALLENGE_EMAIL": _clean(os.getenv("CHALLENGE_EMAIL")),
    }

    # Report every missing value at once, not just the first
    missing = [key for key, value in values.items() if not value]
    if missing:
        raise RuntimeError(
            f"Missing required settings: {', '.join(missing)}. "
            "Please add them to your .env file."
        )

    # ---------------------------------------------------------------------
    # STEP 3: Build and return the Settings object
    # ---------------------------------------------------------------------
    return Settings(
        # e.g., "api.example.com/hiring/" -> "https://api.example.com/hiring"
        base_url=_normalize_base_url(values["CHALLENGE_BASE_URL"]),

        # Sent as {"name", "regNo", "email"} when requesting the webhook
        identity=Identity(
            name=values["CHALLENGE_NAME"],
            reg_no=values["CHALLENGE_REG_NO"],
            email=values["CHALLENGE_EMAIL"],
        ),

        # Per-request timeout (default: 30 seconds)
        timeout_sec=_parse_timeout(_clean(os.getenv("CHALLENGE_TIMEOUT_SEC"))),
    )
