from .kv import KeyValueStore, MemoryKeyValueStore, JsonFileKeyValueStore
from .app_state import STATE_KEY, load_app_state, save_app_state

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "STATE_KEY",
    "load_app_state",
    "save_app_state",
]
