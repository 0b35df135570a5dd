from .user import UserCreate, UserUpdate, UserCredentials
from .status import StatusCreate, StatusUpdate
from .label import LabelCreate, LabelUpdate
from .task import TaskCreate, TaskUpdate, TaskFilter

__all__ = [
    # User schemas
    "UserCreate", "UserUpdate", "UserCredentials",

    # Status schemas
    "StatusCreate", "StatusUpdate",

    # Label schemas
    "LabelCreate", "LabelUpdate",

    # Task schemas
    "TaskCreate", "TaskUpdate", "TaskFilter",
]
