from .user import UserDB
from .status import StatusDB
from .label import LabelDB
from .task import TaskDB, TaskLabelDB

__all__ = ["UserDB", "StatusDB", "LabelDB", "TaskDB", "TaskLabelDB"]
