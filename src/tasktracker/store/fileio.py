"""整文件读写辅助

所有 OSError 统一包装为 StorageIOError。写入采用临时文件 + os.replace，
写入中途失败时原文件保持不变；不提供文件锁，并发写入仍可能丢失更新。
"""

import os
from pathlib import Path

from ..exceptions import StorageIOError


def read_text(path: Path) -> str:
    """读取整个文件（UTF-8）"""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageIOError(path, exc) from exc


def write_atomic(path: Path, content: str) -> None:
    """整文件重写：先写同目录临时文件，再 os.replace 覆盖"""
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise StorageIOError(path, exc) from exc
