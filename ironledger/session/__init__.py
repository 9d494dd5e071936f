from .rest_timer import RestTimer, RestTimerStatus, DEFAULT_EXTEND_SECONDS
from .store import SessionStore, SessionAlreadyActiveError, SetEdit, SetToggleResult

__all__ = [
    "RestTimer",
    "RestTimerStatus",
    "DEFAULT_EXTEND_SECONDS",
    "SessionStore",
    "SessionAlreadyActiveError",
    "SetEdit",
    "SetToggleResult",
]
