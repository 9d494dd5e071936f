import logging
from functools import lru_cache

from ironledger.db import JsonFileKeyValueStore
from ironledger.session import SessionStore
from .env_loader import get_state_path, get_weight_unit

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def session_store() -> SessionStore:
    """The process-wide store, built on first use.

    Tests replace it through `app.dependency_overrides`.
    """
    path = get_state_path()
    logger.info(f"Loading state from {path}")
    return SessionStore(JsonFileKeyValueStore(path))


def weight_unit() -> str:
    return get_weight_unit()
