"""Config Pointer -- 两行配置文件

第 1 行：下一个 ID 计数器（由 ID Allocator 独占维护）
第 2 行：当前激活的 store 文件路径（由 CLI 层维护）
"""

from pathlib import Path

import structlog
from pydantic import BaseModel, Field

from ..exceptions import InvalidConfigError
from .fileio import read_text, write_atomic

log = structlog.get_logger()

STORE_SUFFIX = ".json"


class ConfigPointer(BaseModel):
    """config pointer 内容"""

    next_id: int = Field(description="下一个待分配的任务 ID")
    store_path: str = Field(description="当前 store 文件路径（按写入原样保存）")


def read_lines(path: Path) -> list[str]:
    """读取 config pointer 全部行，文件缺失时抛出 InvalidConfigError"""
    if not path.is_file():
        raise InvalidConfigError(f"配置文件不存在: {path}", path=path)
    return read_text(path).splitlines()


def parse_next_id(lines: list[str], path: Path) -> int:
    """解析第 1 行计数器"""
    if not lines:
        raise InvalidConfigError(f"配置文件为空: {path}", path=path)
    try:
        return int(lines[0].strip())
    except ValueError as exc:
        raise InvalidConfigError(
            f"配置文件第 1 行不是整数: {lines[0]!r}", path=path
        ) from exc


def load_config_pointer(path: Path) -> ConfigPointer:
    """读取并校验 config pointer

    Raises:
        InvalidConfigError: 文件缺失、计数器非整数或缺少 store 路径
    """
    lines = read_lines(path)
    next_id = parse_next_id(lines, path)
    if len(lines) < 2 or not lines[1].strip():
        raise InvalidConfigError(f"配置文件缺少 store 路径: {path}", path=path)
    return ConfigPointer(next_id=next_id, store_path=lines[1].strip())


def save_config_pointer(path: Path, pointer: ConfigPointer) -> None:
    """写入 config pointer（两行，无结尾换行）"""
    write_atomic(path, f"{pointer.next_id}\n{pointer.store_path}")
    log.debug(
        "config_pointer_saved",
        path=str(path),
        next_id=pointer.next_id,
        store_path=pointer.store_path,
    )


def normalize_store_name(name: str) -> str:
    """校验并规范化 store 文件名：不允许空格，缺少 .json 后缀时补齐

    Raises:
        InvalidConfigError: 文件名为空或包含空格
    """
    name = name.strip()
    if not name or " " in name:
        raise InvalidConfigError(f"无效的文件名（不能为空或包含空格）: {name!r}")
    if not name.endswith(STORE_SUFFIX):
        name += STORE_SUFFIX
    return name


def resolve_store_path(config_path: Path, store_path: str) -> Path:
    """相对路径按 config pointer 所在目录解析"""
    candidate = Path(store_path).expanduser()
    if candidate.is_absolute():
        return candidate
    return config_path.parent / candidate
