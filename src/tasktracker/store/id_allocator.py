"""ID Allocator -- 基于 config pointer 第 1 行的持久化计数器

单写者假设：并发调用不安全，两个进程同时分配可能得到相同 ID。
"""

from pathlib import Path

import structlog

from .config_pointer import parse_next_id, read_lines
from .fileio import write_atomic

log = structlog.get_logger()


class ConfigIdAllocator:
    """IdAllocator 的 config pointer 文件实现

    每次调用都重新读取文件，不在进程内缓存计数器。
    """

    def __init__(self, config_path: str | Path) -> None:
        self._config_path = Path(config_path)

    @property
    def config_path(self) -> Path:
        return self._config_path

    def peek_next_id(self) -> int:
        """读取下一个 ID，不修改计数器

        Raises:
            InvalidConfigError: config pointer 缺失或第 1 行不是整数
        """
        return parse_next_id(read_lines(self._config_path), self._config_path)

    def allocate(self) -> int:
        """返回当前计数器值，并将递增后的值写回 config pointer

        第 2 行及之后的内容原样保留。
        """
        lines = read_lines(self._config_path)
        task_id = parse_next_id(lines, self._config_path)
        rest = lines[1:]
        write_atomic(self._config_path, "\n".join([str(task_id + 1), *rest]))
        log.debug("task_id_allocated", task_id=task_id, next_id=task_id + 1)
        return task_id
