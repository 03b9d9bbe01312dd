"""TaskTracker -- 命令行任务追踪器

任务以单行扁平 JSON 对象的形式保存在 JSON 数组文件中，
config pointer（两行文本）记录下一个 ID 与当前 store 文件。
"""

from .exceptions import (
    InvalidConfigError,
    InvalidTaskError,
    MalformedRecordError,
    StorageIOError,
    TaskNotFoundError,
    TaskTrackerError,
)
from .models import Task, TaskStatus
from .services.task_service import TaskService
from .store import ConfigIdAllocator, JsonArrayStore, StoreGroup, open_store_group

__version__ = "0.1.0"
__all__ = [
    "Task",
    "TaskStatus",
    "TaskService",
    "JsonArrayStore",
    "ConfigIdAllocator",
    "StoreGroup",
    "open_store_group",
    "TaskTrackerError",
    "TaskNotFoundError",
    "MalformedRecordError",
    "StorageIOError",
    "InvalidConfigError",
    "InvalidTaskError",
]
