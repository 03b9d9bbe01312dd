"""CLI 入口模块 -- python -m tasktracker <command>

支持的命令：
  init [name]                 创建 store 文件并写入 config pointer
  config <name>               切换当前 store 文件
  add <description>           新建任务
  update <id> <description>   更新任务描述
  delete <id>                 删除任务
  mark-todo <id>              标记为 TODO
  mark-in-progress <id>       标记为 IN_PROGRESS
  mark-done <id>              标记为 DONE
  list [all|todo|in-progress|done]  列出任务
"""

import sys
from collections.abc import Callable

import structlog

from .config import TrackerConfig, load_tracker_config
from .exceptions import InvalidConfigError, TaskTrackerError
from .logging_config import setup_logging
from .models import Task, TaskStatus, parse_status_alias
from .services.task_service import TaskService
from .store import (
    ConfigIdAllocator,
    ConfigPointer,
    JsonArrayStore,
    load_config_pointer,
    normalize_store_name,
    open_store_group,
    resolve_store_path,
    save_config_pointer,
)

log = structlog.get_logger()

USAGE = """用法: python -m tasktracker <command> [args]
命令:
  init [name]                       创建 store 文件并设为当前 store
  config <name>                     切换当前 store 文件
  add <description>                 新建任务
  update <id> <description>         更新任务描述
  delete <id>                       删除任务
  mark-todo <id>                    标记为 TODO
  mark-in-progress <id>             标记为 IN_PROGRESS
  mark-done <id>                    标记为 DONE
  list [all|todo|in-progress|done]  列出任务"""

# 状态变更命令 -> 目标状态
MARK_COMMANDS: dict[str, TaskStatus] = {
    "mark-todo": TaskStatus.TODO,
    "mark-in-progress": TaskStatus.IN_PROGRESS,
    "mark-done": TaskStatus.DONE,
}

ROW_FORMAT = "{:>6}    {:<12}    {:<10}    {:<10}    {}"


class UsageError(Exception):
    """命令行参数错误"""


def _require(args: list[str], count: int) -> None:
    if len(args) != count:
        raise UsageError("参数数量错误")


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise UsageError(f"无效的任务 ID: {raw}") from exc


def _format_row(task: Task) -> str:
    return ROW_FORMAT.format(
        task.id,
        task.status.value,
        task.created_at.isoformat(),
        task.updated_at.isoformat(),
        task.description,
    )


def cmd_init(config: TrackerConfig, args: list[str]) -> None:
    """创建 store 文件；已存在时不做修改"""
    if len(args) > 1:
        raise UsageError("参数数量错误")
    name = normalize_store_name(args[0] if args else config.default_store_name)
    store = JsonArrayStore(resolve_store_path(config.config_path, name))
    if store.path.exists():
        print(f"文件已存在: {name}")
        return

    # 首次 init 从 1 开始；已有 config pointer 时沿用其计数器，损坏则报错
    if config.config_path.exists():
        next_id = ConfigIdAllocator(config.config_path).peek_next_id()
    else:
        next_id = 1

    store.init()
    save_config_pointer(config.config_path, ConfigPointer(next_id=next_id, store_path=name))
    print(f"任务文件初始化完成: {name}")


def cmd_config(config: TrackerConfig, args: list[str]) -> None:
    """切换当前 store 文件，保留 ID 计数器"""
    _require(args, 1)
    name = normalize_store_name(args[0])
    store_path = resolve_store_path(config.config_path, name)
    if not store_path.is_file():
        raise InvalidConfigError(f"store 文件不存在: {name}，请先执行 init", path=store_path)
    pointer = load_config_pointer(config.config_path)
    save_config_pointer(
        config.config_path,
        pointer.model_copy(update={"store_path": name}),
    )
    print(f"配置已更新，当前 store: {name}")


def _service(config: TrackerConfig) -> TaskService:
    group = open_store_group(config.config_path)
    return TaskService(group.object_store, group.id_allocator)


def cmd_add(config: TrackerConfig, args: list[str]) -> None:
    _require(args, 1)
    task = _service(config).create_task(args[0])
    print(f"任务已添加 (ID: {task.id})")


def cmd_update(config: TrackerConfig, args: list[str]) -> None:
    _require(args, 2)
    task_id = _parse_id(args[0])
    _service(config).update_description(task_id, args[1])
    print(f"任务已更新 (ID: {task_id})")


def cmd_delete(config: TrackerConfig, args: list[str]) -> None:
    _require(args, 1)
    task_id = _parse_id(args[0])
    _service(config).delete_task(task_id)
    print(f"任务已删除 (ID: {task_id})")


def cmd_list(config: TrackerConfig, args: list[str]) -> None:
    """列出任务，可按状态筛选"""
    if len(args) > 1:
        raise UsageError("参数数量错误")
    status: TaskStatus | None = None
    if args and args[0] != "all":
        status = parse_status_alias(args[0])
        if status is None:
            raise UsageError(f"未知状态: {args[0]}（可用: all, todo, in-progress, done）")

    tasks = _service(config).list_tasks(status)
    if not tasks:
        print("没有任务")
        return
    print(ROW_FORMAT.format("ID", "Status", "CreatedAt", "UpdatedAt", "Description"))
    for task in tasks:
        print(_format_row(task))


def _mark(status: TaskStatus) -> Callable[[TrackerConfig, list[str]], None]:
    def handler(config: TrackerConfig, args: list[str]) -> None:
        _require(args, 1)
        task_id = _parse_id(args[0])
        _service(config).update_status(task_id, status)
        print(f"任务状态已更新 (ID: {task_id}, {status.value})")

    return handler


COMMANDS: dict[str, Callable[[TrackerConfig, list[str]], None]] = {
    "init": cmd_init,
    "config": cmd_config,
    "add": cmd_add,
    "update": cmd_update,
    "delete": cmd_delete,
    "list": cmd_list,
    **{name: _mark(status) for name, status in MARK_COMMANDS.items()},
}


def main(argv: list[str] | None = None) -> int:
    """CLI 主入口

    Returns:
        进程退出码：0 成功，1 失败
    """
    args = sys.argv[1:] if argv is None else argv

    config = load_tracker_config()
    setup_logging(config.log_format, config.log_level)

    if len(args) < 1 or len(args) > 3:
        print("参数数量错误")
        print(USAGE)
        return 1

    command, rest = args[0], args[1:]
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"未知命令: {command}")
        print(USAGE)
        return 1

    try:
        handler(config, rest)
    except UsageError as exc:
        print(exc)
        print(USAGE)
        return 1
    except TaskTrackerError as exc:
        log.debug("command_failed", command=command, error=exc.message)
        print(f"错误: {exc.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
