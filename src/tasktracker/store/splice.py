"""JSON 数组文本拼接辅助 -- 纯函数，基于精确字符偏移

store 文件规范格式：

    [
        {...},
        {...}
    ]

每个对象单行、扁平、四空格缩进；最后一个对象后无逗号；文件无结尾换行。
这里不解析 JSON 树，只做对象边界识别与文本拼接。
调用方传入的对象文本必须是此前读到的原文（逐字节一致）。
"""

import re

from ..exceptions import MalformedRecordError

EMPTY_ARRAY = "[\n]"
INDENT = "    "

# 对象边界："},{" 中间的逗号（description 不允许包含该序列）
_OBJECT_BOUNDARY = re.compile(r"(?<=\}),(?=\{)")


def _array_bounds(content: str) -> tuple[int, int]:
    """返回 "[" 与最后一个 "]" 的下标"""
    open_idx = content.find("[")
    close_idx = content.rfind("]")
    if open_idx == -1 or close_idx == -1 or close_idx < open_idx:
        raise MalformedRecordError("store 文件不是 JSON 数组")
    if content[:open_idx].strip() or content[close_idx + 1 :].strip():
        raise MalformedRecordError("store 文件在数组外存在多余内容")
    return open_idx, close_idx


def split_objects(content: str) -> list[str]:
    """将数组文本切分为对象文本列表

    各行去除首尾空白后拼接，去掉外层 [ ]，按 "},{" 边界切分。
    空数组返回空列表（而不是包含一个空串的列表）。
    """
    compact = "".join(line.strip() for line in content.splitlines())
    open_idx, close_idx = _array_bounds(compact)
    body = compact[open_idx + 1 : close_idx].strip()
    if not body:
        return []
    return _OBJECT_BOUNDARY.split(body)


def insert_object(content: str, object_text: str) -> str:
    """在收尾 "]" 之前追加对象

    空数组：对象成为唯一元素；否则在最后一个对象后追加 ",\\n" + 缩进 + 对象。
    """
    open_idx, close_idx = _array_bounds(content)
    if not content[open_idx + 1 : close_idx].strip():
        return content[: open_idx + 1] + "\n" + INDENT + object_text + "\n" + content[close_idx:]

    last_close = content.rfind("}", open_idx, close_idx)
    if last_close == -1:
        raise MalformedRecordError("store 文件数组非空但找不到对象结尾")
    insert_at = last_close + 1
    return content[:insert_at] + ",\n" + INDENT + object_text + content[insert_at:]


def _locate(content: str, object_text: str) -> int:
    start = content.find(object_text)
    if start == -1:
        raise MalformedRecordError("store 中找不到该记录原文", record=object_text)
    return start


def replace_object(content: str, old_object_text: str, new_object_text: str) -> str:
    """将 old 原文（从匹配起点到其收尾 "}"）替换为 new"""
    start = _locate(content, old_object_text)
    end = start + len(old_object_text)
    return content[:start] + new_object_text + content[end:]


def remove_object(content: str, object_text: str) -> str:
    """删除对象，并额外吞掉一个相邻逗号分隔符

    优先删除前一个逗号（非首元素）；否则删除后一个逗号（首元素但非末元素）；
    否则（唯一元素）只删除对象本身。对象独占一行时连同该行缩进和换行一起删除，
    与其他内容同行（如手写的 [{...},{...}]）时只删除对象文本。
    """
    start = _locate(content, object_text)
    end = start + len(object_text)
    line_start = content.rfind("\n", 0, start) + 1
    line_end = content.find("\n", end)
    if line_end == -1:
        line_end = len(content)
    cut_from = line_start if not content[line_start:start].strip() else start

    prev_end = len(content[:cut_from].rstrip())
    if prev_end > 0 and content[prev_end - 1] == ",":
        # "prev,\n    obj" -> "prev"
        return content[: prev_end - 1] + content[end:]

    if content.startswith(",", end):
        # "    obj,\n    next" -> "    next"
        if cut_from == line_start and not content[end + 1 : line_end].strip():
            return content[:line_start] + content[line_end + 1 :]
        return content[:start] + content[end + 1 :]

    # "[\n    obj\n]" -> "[\n]"
    if cut_from == line_start and not content[end:line_end].strip() and line_end < len(content):
        return content[:line_start] + content[line_end + 1 :]
    return content[:start] + content[end:]
