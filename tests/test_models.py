"""Domain Models 单元测试

测试内容：
1. TaskStatus 枚举与别名解析
2. Task 不可变字段与校验
3. 变更操作刷新 updated_at
"""

from datetime import date

import pytest
from pydantic import ValidationError
from tasktracker.models import STATUS_ALIASES, Task, TaskStatus, parse_status_alias
from tasktracker.models import task as task_model


def _task(**overrides) -> Task:
    data = {
        "id": 1,
        "created_at": date(2024, 1, 1),
        "updated_at": date(2024, 1, 1),
        "description": "写周报",
    }
    data.update(overrides)
    return Task(**data)


class TestTaskStatus:
    """TaskStatus 枚举测试"""

    def test_values(self):
        """存储文本与枚举值一致"""
        assert TaskStatus.TODO == "TODO"
        assert TaskStatus.IN_PROGRESS == "IN_PROGRESS"
        assert TaskStatus.DONE == "DONE"
        assert TaskStatus.UNKNOWN == "UNKNOWN"

    def test_from_text_known(self):
        assert TaskStatus.from_text("DONE") == TaskStatus.DONE
        assert TaskStatus.from_text(" IN_PROGRESS ") == TaskStatus.IN_PROGRESS

    def test_from_text_unknown_is_sentinel(self):
        """无法识别或缺失的状态解析为 UNKNOWN，不抛异常"""
        assert TaskStatus.from_text("BOGUS") == TaskStatus.UNKNOWN
        assert TaskStatus.from_text("todo") == TaskStatus.UNKNOWN
        assert TaskStatus.from_text(None) == TaskStatus.UNKNOWN

    def test_aliases(self):
        """CLI 别名映射"""
        assert parse_status_alias("todo") == TaskStatus.TODO
        assert parse_status_alias("in-progress") == TaskStatus.IN_PROGRESS
        assert parse_status_alias("DONE") == TaskStatus.DONE
        assert parse_status_alias("all") is None
        assert TaskStatus.UNKNOWN not in STATUS_ALIASES.values()


class TestTaskModel:
    """Task 模型测试"""

    def test_defaults(self):
        task = Task(id=3, created_at=date(2024, 1, 1), updated_at=date(2024, 1, 1))
        assert task.status == TaskStatus.TODO
        assert task.description == ""

    def test_id_is_frozen(self):
        """id 创建后不可修改"""
        task = _task()
        with pytest.raises(ValidationError):
            task.id = 2

    def test_created_at_is_frozen(self):
        task = _task()
        with pytest.raises(ValidationError):
            task.created_at = date(2024, 2, 1)

    def test_updated_before_created_rejected(self):
        """updated_at 不能早于 created_at"""
        with pytest.raises(ValidationError):
            _task(created_at=date(2024, 2, 1), updated_at=date(2024, 1, 1))

    def test_description_line_break_rejected(self):
        with pytest.raises(ValidationError):
            _task(description="第一行\n第二行")

    @pytest.mark.parametrize("description", ["a, b\\", 'say \\"hi\\"', "x},{y"])
    def test_description_not_storable_rejected(self, description):
        """无法无损写回 store 的描述被拒绝"""
        with pytest.raises(ValidationError):
            _task(description=description)

    def test_description_inner_backslash_allowed(self):
        assert _task(description="C:\\temp\\a, b").description == "C:\\temp\\a, b"


class TestTaskMutation:
    """变更操作测试"""

    def test_update_status_refreshes_updated_at(self, monkeypatch):
        monkeypatch.setattr(task_model, "today", lambda: date(2024, 3, 5))
        task = _task()
        task.update_status(TaskStatus.DONE)
        assert task.status == TaskStatus.DONE
        assert task.updated_at == date(2024, 3, 5)
        assert task.created_at == date(2024, 1, 1)

    def test_update_description_refreshes_updated_at(self, monkeypatch):
        monkeypatch.setattr(task_model, "today", lambda: date(2024, 3, 6))
        task = _task()
        task.update_description("改写周报")
        assert task.description == "改写周报"
        assert task.updated_at == date(2024, 3, 6)

    def test_update_description_validated(self):
        """变更同样经过校验"""
        task = _task()
        with pytest.raises(ValidationError):
            task.update_description("a\nb")
