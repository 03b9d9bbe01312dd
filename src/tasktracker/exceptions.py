"""TaskTracker 异常体系

core 层所有失败均以类型化异常抛出，由 CLI 负责渲染与退出码。
"""

from pathlib import Path


class TaskTrackerError(Exception):
    """TaskTracker 基础异常"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskNotFoundError(TaskTrackerError):
    """指定 ID 的任务在 store 中不存在"""

    def __init__(self, task_id: int) -> None:
        """
        Args:
            task_id: 查找的任务 ID
        """
        super().__init__(f"任务不存在: ID={task_id}")
        self.task_id = task_id


class MalformedRecordError(TaskTrackerError):
    """store 中的对象无法解码（字段缺失、类型转换失败或文件结构异常）"""

    def __init__(self, message: str, record: str | None = None) -> None:
        """
        Args:
            message: 错误描述
            record: 出错的原始对象文本（如有）
        """
        super().__init__(message)
        self.record = record


class StorageIOError(TaskTrackerError):
    """底层文件无法打开/读取/写入"""

    def __init__(self, path: str | Path, original_error: Exception) -> None:
        """
        Args:
            path: 出错的文件路径
            original_error: 原始 OSError
        """
        super().__init__(f"文件读写失败: {path} -- {original_error}")
        self.path = Path(path)
        self.original_error = original_error


class InvalidConfigError(TaskTrackerError):
    """config pointer 缺失、格式错误或指向不存在的 store 文件"""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class InvalidTaskError(TaskTrackerError):
    """用户提供的字段值未通过 Task 模型校验"""
