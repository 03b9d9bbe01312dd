"""structlog 配置模块

CLI 的 stdout 是用户可见的命令结果（任务列表、提示信息），可能被管道或脚本解析，
因此日志一律写 stderr。默认级别 WARNING，正常使用时终端上只有命令输出；
排查问题时设 TASKTRACKER_LOG_LEVEL=DEBUG，需要机器采集时设 TASKTRACKER_LOG_FORMAT=json。
"""

import logging
import sys

import structlog


def setup_logging(log_format: str = "dev", log_level: str = "WARNING") -> None:
    """初始化 structlog 配置

    Args:
        log_format: "json" 每行一个 JSON 对象；其他值使用 ConsoleRenderer
        log_level: 标准库 logging 级别名，无法识别时按 WARNING
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
