"""TrackerConfig -- 运行配置加载

从环境变量加载配置，全部有默认值，缺省即可运行。
"""

import os
from pathlib import Path
from typing import Literal

import structlog
from pydantic import BaseModel, Field, ValidationError

log = structlog.get_logger()


class TrackerConfig(BaseModel):
    """TaskTracker 配置 -- 从环境变量加载

    环境变量:
        TASKTRACKER_CONFIG_PATH: config pointer 文件路径（默认 config.txt）
        TASKTRACKER_DEFAULT_STORE: init 未指定文件名时使用的 store 文件名
        TASKTRACKER_LOG_FORMAT: 日志渲染模式（dev/json）
        TASKTRACKER_LOG_LEVEL: 日志级别（默认 WARNING）
    """

    config_path: Path = Field(
        default=Path("config.txt"),
        description="config pointer 文件路径",
    )
    default_store_name: str = Field(
        default="taskList.json",
        min_length=1,
        description="默认 store 文件名",
    )
    log_format: Literal["dev", "json"] = Field(
        default="dev",
        description="日志渲染模式：dev / json",
    )
    log_level: str = Field(
        default="WARNING",
        description="日志级别",
    )


def load_tracker_config() -> TrackerConfig:
    """从环境变量加载 TrackerConfig

    环境变量映射:
        TASKTRACKER_CONFIG_PATH -> config_path
        TASKTRACKER_DEFAULT_STORE -> default_store_name
        TASKTRACKER_LOG_FORMAT -> log_format（非法值忽略，使用默认值）
        TASKTRACKER_LOG_LEVEL -> log_level

    Returns:
        TrackerConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKTRACKER_CONFIG_PATH"):
        kwargs["config_path"] = Path(val).expanduser()

    if val := os.environ.get("TASKTRACKER_DEFAULT_STORE"):
        kwargs["default_store_name"] = val

    if val := os.environ.get("TASKTRACKER_LOG_FORMAT"):
        try:
            TrackerConfig(log_format=val)
        except ValidationError:
            log.warning(
                "invalid_log_format_config",
                env_var="TASKTRACKER_LOG_FORMAT",
                value=val,
                fallback="dev",
            )
        else:
            kwargs["log_format"] = val

    if val := os.environ.get("TASKTRACKER_LOG_LEVEL"):
        kwargs["log_level"] = val.upper()

    return TrackerConfig(**kwargs)
