"""TaskService -- 任务创建/查询/更新/删除业务逻辑

每个操作的流程：
1. 从 ObjectStore 读取对象原文
2. 解码为 Task 并就地变更
3. 重新编码，用原文定位并写回替换
"""

import structlog
from pydantic import ValidationError

from ..exceptions import InvalidTaskError, MalformedRecordError
from ..models import Task, TaskStatus
from ..store.protocols import IdAllocator, ObjectStore
from ..store.records import decode_task, encode_task, new_task

log = structlog.get_logger()


class TaskService:
    """任务业务服务"""

    def __init__(self, object_store: ObjectStore, id_allocator: IdAllocator) -> None:
        self._store = object_store
        self._allocator = id_allocator

    def create_task(self, description: str) -> Task:
        """创建任务并追加到 store"""
        task = new_task(description, self._allocator)
        self._store.insert(encode_task(task))
        log.info("task_created", task_id=task.id)
        return task

    def get_task(self, task_id: int) -> Task:
        """根据 ID 查询任务，不存在时抛出 TaskNotFoundError"""
        return decode_task(self._store.find_by_id(task_id))

    def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        """按文件顺序列出任务，可按状态筛选

        任一记录解码失败时直接抛出 MalformedRecordError，不跳过。
        """
        tasks: list[Task] = []
        for index, object_text in enumerate(self._store.list_objects()):
            try:
                task = decode_task(object_text)
            except MalformedRecordError as exc:
                log.warning("task_record_malformed", index=index, error=exc.message)
                raise
            if status is None or task.status == status:
                tasks.append(task)
        return tasks

    def update_description(self, task_id: int, description: str) -> Task:
        """更新任务描述"""
        old_text = self._store.find_by_id(task_id)
        task = decode_task(old_text)
        try:
            task.update_description(description)
        except ValidationError as exc:
            raise InvalidTaskError(f"任务描述无效: {exc.errors()[0]['msg']}") from exc
        self._store.replace(old_text, encode_task(task))
        log.info("task_description_updated", task_id=task_id)
        return task

    def update_status(self, task_id: int, status: TaskStatus) -> Task:
        """更新任务状态"""
        if status == TaskStatus.UNKNOWN:
            raise InvalidTaskError("不能将任务状态设置为 UNKNOWN")
        old_text = self._store.find_by_id(task_id)
        task = decode_task(old_text)
        task.update_status(status)
        self._store.replace(old_text, encode_task(task))
        log.info("task_status_updated", task_id=task_id, status=status.value)
        return task

    def delete_task(self, task_id: int) -> Task:
        """删除任务，返回被删除的任务"""
        old_text = self._store.find_by_id(task_id)
        task = decode_task(old_text)
        self._store.remove(old_text)
        log.info("task_deleted", task_id=task_id)
        return task
