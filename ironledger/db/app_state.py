"""Load and save the application state blob."""

import logging

from pydantic import ValidationError

from ironledger.models import AppState
from .kv import KeyValueStore

logger = logging.getLogger(__name__)

# The one key the whole state is stored under.
STATE_KEY = "IronLedgerAppState"


def load_app_state(store: KeyValueStore) -> AppState:
    """Decode the persisted state, falling back to defaults.

    A missing blob and an undecodable one are treated the same way: first run
    and corrupted storage both start over from `AppState.default()`.
    """
    try:
        blob = store.get(STATE_KEY)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read stored state, using defaults: {e}")
        return AppState.default()

    if blob is None:
        logger.info("No stored state found, starting with defaults")
        return AppState.default()

    try:
        return AppState.model_validate_json(blob)
    except ValidationError as e:
        logger.warning(
            f"Stored state failed to decode ({e.error_count()} errors), using defaults"
        )
        return AppState.default()


def save_app_state(store: KeyValueStore, state: AppState) -> None:
    """Encode the whole state and overwrite the stored blob.

    Raises:
        OSError: If the backend could not write.
    """
    store.set(STATE_KEY, state.model_dump_json())
    logger.debug(
        f"Saved state: {len(state.history)} sessions, "
        f"{len(state.personal_records)} records, next {state.next_workout_type}"
    )
