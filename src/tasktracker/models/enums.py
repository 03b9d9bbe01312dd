"""枚举定义

TaskStatus 状态枚举，以及 CLI 状态别名映射。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 状态"""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    # 解码失败哨兵值，正常变更流程不会赋值
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_text(cls, text: str | None) -> "TaskStatus":
        """解析存储文本，未知或缺失时返回 UNKNOWN（不抛异常）"""
        if text is None:
            return cls.UNKNOWN
        try:
            return cls(text.strip())
        except ValueError:
            return cls.UNKNOWN


# CLI 状态参数 -> TaskStatus
STATUS_ALIASES: dict[str, TaskStatus] = {
    "todo": TaskStatus.TODO,
    "in-progress": TaskStatus.IN_PROGRESS,
    "done": TaskStatus.DONE,
}


def parse_status_alias(alias: str) -> TaskStatus | None:
    """将 CLI 状态参数（todo/in-progress/done）转换为 TaskStatus

    Returns:
        对应的 TaskStatus，无法识别时返回 None
    """
    return STATUS_ALIASES.get(alias.strip().lower())
