"""ObjectStore 文件实现 -- JSON 数组文本的对象级 CRUD

每次操作都完整读取、变换、重写目标文件，不在调用之间缓存内容。
不提供并发控制：同一 store 同时只应有一个进程在写。
"""

from pathlib import Path

import structlog

from ..exceptions import TaskNotFoundError
from .fileio import read_text, write_atomic
from .records import get_field
from .splice import EMPTY_ARRAY, insert_object, remove_object, replace_object, split_objects

log = structlog.get_logger()


class JsonArrayStore:
    """ObjectStore 的 JSON 数组文件实现"""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def init(self) -> None:
        """文件不存在时写入空数组；已存在时不做任何检查和修改"""
        if self._path.exists():
            return
        write_atomic(self._path, EMPTY_ARRAY)
        log.info("store_initialized", path=str(self._path))

    def list_objects(self) -> list[str]:
        """按文件顺序返回所有对象文本"""
        return split_objects(read_text(self._path))

    def insert(self, object_text: str) -> None:
        """追加对象到数组末尾"""
        content = read_text(self._path)
        write_atomic(self._path, insert_object(content, object_text))
        log.debug("store_object_inserted", path=str(self._path))

    def find_by_id(self, task_id: int) -> str:
        """返回第一个 ID 匹配的对象原文

        Raises:
            TaskNotFoundError: 没有对象的 ID 等于 task_id
            MalformedRecordError: 遍历过程中某个对象的 ID 无法解析
        """
        for object_text in self.list_objects():
            if get_field(object_text, "ID") == task_id:
                return object_text
        raise TaskNotFoundError(task_id)

    def replace(self, old_object_text: str, new_object_text: str) -> None:
        """用 new 替换 old 原文；old 必须是此前读到的未修改文本"""
        content = read_text(self._path)
        write_atomic(self._path, replace_object(content, old_object_text, new_object_text))
        log.debug("store_object_replaced", path=str(self._path))

    def remove(self, object_text: str) -> None:
        """删除对象原文及一个相邻逗号分隔符"""
        content = read_text(self._path)
        write_atomic(self._path, remove_object(content, object_text))
        log.debug("store_object_removed", path=str(self._path))
