from .session import router as session_router
from .rest_timer import router as rest_timer_router
from .rotation import router as rotation_router
from .templates import router as templates_router
from .history import router as history_router
from .records import router as records_router

__all__ = [
    "session_router",
    "rest_timer_router",
    "rotation_router",
    "templates_router",
    "history_router",
    "records_router",
]
