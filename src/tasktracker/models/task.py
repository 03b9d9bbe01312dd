"""Task Domain Model

单个任务的内存表示。id 与 created_at 创建后不可变，
status / description 的每次变更都会刷新 updated_at。
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import TaskStatus

# store 文件中相邻对象的分隔文本
OBJECT_SEPARATOR = "},{"


def today() -> date:
    """当前日期（测试中可 monkeypatch）"""
    return date.today()


class Task(BaseModel):
    """Task 数据模型

    存储格式为单行扁平 JSON 对象，description 只转义双引号。
    无法无损写回的描述在校验阶段拒绝，见 _storable_description。
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(frozen=True, description="唯一 ID，由 ID Allocator 分配")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="当前状态")
    created_at: date = Field(frozen=True, description="创建日期")
    updated_at: date = Field(description="最近更新日期")
    description: str = Field(default="", description="任务描述")

    @field_validator("description")
    @classmethod
    def _storable_description(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("description 不能包含换行")
        if value.endswith("\\") or '\\"' in value:
            raise ValueError("description 中的反斜杠不能位于末尾或紧邻双引号")
        if OBJECT_SEPARATOR in value:
            raise ValueError(f"description 不能包含对象分隔符 {OBJECT_SEPARATOR}")
        return value

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> "Task":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at 不能早于 created_at")
        return self

    def update_status(self, new_status: TaskStatus) -> None:
        """就地更新状态并刷新 updated_at"""
        self.status = new_status
        self.updated_at = today()

    def update_description(self, new_description: str) -> None:
        """就地更新描述并刷新 updated_at"""
        self.description = new_description
        self.updated_at = today()
