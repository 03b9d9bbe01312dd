"""全局 pytest 配置 -- 临时 config pointer / store 文件 fixture"""

from datetime import date
from pathlib import Path

import pytest
from tasktracker.models import task as task_model
from tasktracker.services.task_service import TaskService
from tasktracker.store import ConfigIdAllocator, JsonArrayStore

FROZEN_TODAY = date(2024, 1, 1)


@pytest.fixture
def frozen_today(monkeypatch) -> date:
    """固定“今天”为 2024-01-01"""
    monkeypatch.setattr(task_model, "today", lambda: FROZEN_TODAY)
    return FROZEN_TODAY


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """提供临时 config pointer（next_id=1, store=tasks.json）"""
    path = tmp_path / "config.txt"
    path.write_text("1\ntasks.json", encoding="utf-8")
    return path


@pytest.fixture
def store(tmp_path: Path) -> JsonArrayStore:
    """提供已初始化的空 store"""
    store = JsonArrayStore(tmp_path / "tasks.json")
    store.init()
    return store


@pytest.fixture
def allocator(config_path: Path) -> ConfigIdAllocator:
    return ConfigIdAllocator(config_path)


@pytest.fixture
def service(store: JsonArrayStore, allocator: ConfigIdAllocator, frozen_today) -> TaskService:
    return TaskService(store, allocator)
