"""Task Record 编解码 -- 单行扁平 JSON 对象 <-> Task

编码格式（字段顺序固定）：
    {"ID":1,"Status":"TODO","CreatedAt":"2024-01-01","UpdatedAt":"2024-01-01","Description":"..."}

description 中仅转义双引号（\\"），不做其他转义。
解码按 key 逐个扫描，不依赖字段顺序，也不构建通用 JSON 树。
"""

import re
from collections.abc import Callable
from datetime import date
from typing import Any

import structlog
from pydantic import ValidationError

from ..exceptions import InvalidTaskError, MalformedRecordError
from ..models import task as task_model
from ..models.enums import TaskStatus
from ..models.task import Task
from .protocols import IdAllocator

log = structlog.get_logger()

# 存储字段顺序
TASK_FIELDS: tuple[str, ...] = ("ID", "Status", "CreatedAt", "UpdatedAt", "Description")

# 值：带转义的双引号字符串，或到下一个 , / } 为止的裸值
_VALUE_PATTERN = r'("(?:[^"\\]|\\.)*"|[^,}]*)'

_FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    key: re.compile(r'(?:^|[{,])\s*"' + re.escape(key) + r'"\s*:\s*' + _VALUE_PATTERN)
    for key in TASK_FIELDS
}


def _escape(text: str) -> str:
    return text.replace('"', '\\"')


def _unescape(text: str) -> str:
    return text.replace('\\"', '"')


def _unquote(raw: str) -> str:
    raw = raw.strip()
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return _unescape(raw[1:-1])
    return raw


def _parse_date(raw: str) -> date:
    return date.fromisoformat(_unquote(raw))


_CONVERTERS: dict[str, Callable[[str], Any]] = {
    "ID": lambda raw: int(raw.strip()),
    "Status": lambda raw: TaskStatus.from_text(_unquote(raw)),
    "CreatedAt": _parse_date,
    "UpdatedAt": _parse_date,
    "Description": _unquote,
}


def _check_object(text: str) -> str:
    body = text.strip()
    if not (body.startswith("{") and body.endswith("}")):
        raise MalformedRecordError("记录不是 JSON 对象", record=text)
    return body


def _scan(body: str, key: str) -> str | None:
    """返回 key 对应的原始值文本（未转换），缺失时返回 None"""
    match = _FIELD_PATTERNS[key].search(body)
    if match is None:
        return None
    return match.group(1)


def encode_task(task: Task) -> str:
    """将 Task 编码为单行扁平 JSON 对象文本"""
    return (
        f'{{"ID":{task.id},'
        f'"Status":"{task.status.value}",'
        f'"CreatedAt":"{task.created_at.isoformat()}",'
        f'"UpdatedAt":"{task.updated_at.isoformat()}",'
        f'"Description":"{_escape(task.description)}"}}'
    )


def get_field(text: str, key: str) -> Any:
    """从编码对象中提取单个字段并做类型转换，不完整解码

    Args:
        text: 编码后的对象文本
        key: 字段名，取值见 TASK_FIELDS

    Returns:
        ID -> int, Status -> TaskStatus, CreatedAt/UpdatedAt -> date, Description -> str

    Raises:
        ValueError: key 不是已知字段
        MalformedRecordError: 字段缺失或类型转换失败
    """
    if key not in _FIELD_PATTERNS:
        raise ValueError(f"未知字段: {key}")

    body = _check_object(text)
    raw = _scan(body, key)
    if raw is None:
        raise MalformedRecordError(f"记录缺少字段: {key}", record=text)

    try:
        return _CONVERTERS[key](raw)
    except ValueError as exc:
        raise MalformedRecordError(
            f"字段 {key} 无法转换: {raw.strip()}", record=text
        ) from exc


def decode_task(text: str) -> Task:
    """将编码对象解码为 Task

    Status 缺失或无法识别时解码为 UNKNOWN；其他字段缺失或转换失败
    抛出 MalformedRecordError。
    """
    body = _check_object(text)
    raw_status = _scan(body, "Status")
    status = (
        TaskStatus.UNKNOWN if raw_status is None else _CONVERTERS["Status"](raw_status)
    )

    try:
        return Task(
            id=get_field(body, "ID"),
            status=status,
            created_at=get_field(body, "CreatedAt"),
            updated_at=get_field(body, "UpdatedAt"),
            description=get_field(body, "Description"),
        )
    except ValidationError as exc:
        raise MalformedRecordError(f"记录校验失败: {exc.errors()[0]['msg']}", record=text) from exc


def new_task(description: str, allocator: IdAllocator) -> Task:
    """创建新任务：状态 TODO，created_at = updated_at = 今天

    先校验 description，校验通过后才分配 ID，避免无效输入消耗计数器。
    """
    now = task_model.today()
    try:
        draft = Task(id=0, created_at=now, updated_at=now, description=description)
    except ValidationError as exc:
        raise InvalidTaskError(f"任务描述无效: {exc.errors()[0]['msg']}") from exc

    task_id = allocator.allocate()
    log.debug("task_record_created", task_id=task_id)
    return draft.model_copy(update={"id": task_id})
