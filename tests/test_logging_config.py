"""logging_config 测试 -- 日志写 stderr，不污染 CLI 的 stdout"""

import json
import logging

import pytest
import structlog
from tasktracker.logging_config import setup_logging


@pytest.fixture
def reset_root_logger():
    yield
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)


class TestSetupLogging:
    """setup_logging 测试"""

    def test_json_logs_go_to_stderr(self, capsys, reset_root_logger):
        setup_logging("json", "INFO")
        structlog.get_logger("tasktracker.test").info("task_created", task_id=7)

        captured = capsys.readouterr()
        assert captured.out == ""
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event["event"] == "task_created"
        assert event["task_id"] == 7
        assert event["level"] == "info"

    def test_level_filters_below_threshold(self, capsys, reset_root_logger):
        setup_logging("dev", "WARNING")
        structlog.get_logger("tasktracker.test").info("task_listed")
        assert capsys.readouterr().err == ""

    def test_unknown_level_defaults_to_warning(self, reset_root_logger):
        setup_logging("dev", "verbose")
        assert logging.getLogger().level == logging.WARNING
