"""Store Protocol 接口定义

定义 ObjectStore、IdAllocator 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol


class IdAllocator(Protocol):
    """ID 分配接口 -- 跨进程单调递增"""

    def peek_next_id(self) -> int:
        """读取下一个 ID，不修改计数器"""
        ...

    def allocate(self) -> int:
        """返回当前 ID 并持久化递增后的计数器"""
        ...


class ObjectStore(Protocol):
    """JSON 数组文件的对象级 CRUD 接口

    所有对象以编码文本传递；replace/remove 必须传入此前读到的原文。
    """

    def init(self) -> None:
        """文件不存在时创建空数组"""
        ...

    def list_objects(self) -> list[str]:
        """按文件顺序返回所有对象文本"""
        ...

    def insert(self, object_text: str) -> None:
        """追加一个对象到数组末尾"""
        ...

    def find_by_id(self, task_id: int) -> str:
        """返回 ID 匹配的对象文本，不存在时抛出 TaskNotFoundError"""
        ...

    def replace(self, old_object_text: str, new_object_text: str) -> None:
        """用新对象文本替换原文"""
        ...

    def remove(self, object_text: str) -> None:
        """删除对象及其相邻的一个逗号分隔符"""
        ...
