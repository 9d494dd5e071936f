"""Load environment variables early for the FastAPI app.

For local dev, loads a .env file based on ENV ("dev" by default).
In staging and prod the variables come from the process environment and no
.env file is loaded.
"""

import os
import sys
from dotenv import load_dotenv

# Required environment variables that must be set for the app to run.
# If any are missing, the app will fail to start with a clear error message.
REQUIRED_ENV_VARS = [
    "IRONLEDGER_STATE_PATH",
]

DEFAULT_WEIGHT_UNIT = "lbs"


def validate_required_env_vars() -> None:
    """Validate that all required environment variables are set.

    Raises:
        SystemExit: If any required environment variables are missing.
    """
    missing = [var for var in REQUIRED_ENV_VARS if not os.getenv(var)]
    if missing:
        print(
            f"ERROR: Missing required environment variables: {', '.join(missing)}",
            file=sys.stderr,
        )
        print(
            "Please set these variables in your .env file or environment.",
            file=sys.stderr,
        )
        sys.exit(1)


# Load env vars before any app code runs.
env = os.getenv("ENV", "dev")
if env in ("staging", "prod"):
    print(f"Running in {env} environment (env vars from process environment)")
elif env == "dev":
    print("Loading environment variables from .env.dev")
    load_dotenv(".env.dev", verbose=True)
else:
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")

# Validate required env vars after loading.
validate_required_env_vars()


def get_state_path() -> str:
    """Path of the JSON file backing the app's key-value storage."""
    return os.environ["IRONLEDGER_STATE_PATH"]


def get_weight_unit() -> str:
    """Unit label used in exported summaries."""
    return os.getenv("IRONLEDGER_WEIGHT_UNIT", DEFAULT_WEIGHT_UNIT)
