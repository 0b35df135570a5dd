from .root import router as root_router
from .users import router as users_router
from .session import router as session_router
from .statuses import router as statuses_router
from .labels import router as labels_router
from .tasks import router as tasks_router

__all__ = [
    "root_router",
    "users_router",
    "session_router",
    "statuses_router",
    "labels_router",
    "tasks_router",
]
