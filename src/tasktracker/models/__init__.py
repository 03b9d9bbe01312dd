"""TaskTracker Domain Models -- 公共类型导出"""

from .enums import STATUS_ALIASES, TaskStatus, parse_status_alias
from .task import Task

__all__ = [
    "Task",
    "TaskStatus",
    "STATUS_ALIASES",
    "parse_status_alias",
]
