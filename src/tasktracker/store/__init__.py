"""TaskTracker Store -- JSON 数组文件持久化实现

提供工厂函数，根据 config pointer 解析当前 store 并组装 Store 实例组。
"""

from pathlib import Path

from ..exceptions import InvalidConfigError
from .config_pointer import (
    ConfigPointer,
    load_config_pointer,
    normalize_store_name,
    resolve_store_path,
    save_config_pointer,
)
from .id_allocator import ConfigIdAllocator
from .object_store import JsonArrayStore
from .records import TASK_FIELDS, decode_task, encode_task, get_field, new_task


class StoreGroup:
    """Store 实例组 -- 共享同一个 config pointer"""

    def __init__(self, config_path: Path, store_path: Path) -> None:
        self.config_path = config_path
        self.object_store = JsonArrayStore(store_path)
        self.id_allocator = ConfigIdAllocator(config_path)


def open_store_group(config_path: str | Path) -> StoreGroup:
    """根据 config pointer 打开当前激活的 store

    Args:
        config_path: config pointer 文件路径

    Returns:
        StoreGroup 实例

    Raises:
        InvalidConfigError: config pointer 缺失/格式错误，或指向的 store 文件不存在
    """
    config_path = Path(config_path)
    pointer = load_config_pointer(config_path)
    store_path = resolve_store_path(config_path, pointer.store_path)
    if not store_path.is_file():
        raise InvalidConfigError(
            f"store 文件不存在: {store_path}，请先执行 init 或 config",
            path=store_path,
        )
    return StoreGroup(config_path=config_path, store_path=store_path)


__all__ = [
    "StoreGroup",
    "open_store_group",
    "ConfigIdAllocator",
    "JsonArrayStore",
    "ConfigPointer",
    "load_config_pointer",
    "save_config_pointer",
    "normalize_store_name",
    "resolve_store_path",
    "TASK_FIELDS",
    "encode_task",
    "decode_task",
    "get_field",
    "new_task",
]
