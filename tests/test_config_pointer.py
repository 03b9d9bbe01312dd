"""Config Pointer 读写与 store 解析测试"""

from pathlib import Path

import pytest
from tasktracker.exceptions import InvalidConfigError
from tasktracker.store import (
    ConfigPointer,
    JsonArrayStore,
    load_config_pointer,
    normalize_store_name,
    open_store_group,
    resolve_store_path,
    save_config_pointer,
)


class TestConfigPointer:
    """load / save 测试"""

    def test_load(self, config_path: Path):
        pointer = load_config_pointer(config_path)
        assert pointer == ConfigPointer(next_id=1, store_path="tasks.json")

    def test_store_path_trimmed(self, config_path: Path):
        config_path.write_text("4\n  other.json  \n", encoding="utf-8")
        assert load_config_pointer(config_path).store_path == "other.json"

    def test_save_two_lines(self, tmp_path: Path):
        path = tmp_path / "config.txt"
        save_config_pointer(path, ConfigPointer(next_id=12, store_path="work.json"))
        assert path.read_text(encoding="utf-8") == "12\nwork.json"

    def test_missing_store_line(self, config_path: Path):
        config_path.write_text("3", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config_pointer(config_path)


class TestStoreName:
    """store 文件名规范化与路径解析"""

    def test_appends_suffix(self):
        assert normalize_store_name("work") == "work.json"
        assert normalize_store_name("work.json") == "work.json"

    def test_rejects_spaces(self):
        with pytest.raises(InvalidConfigError):
            normalize_store_name("my tasks")

    def test_relative_to_config_dir(self, tmp_path: Path):
        config_path = tmp_path / "cfg" / "config.txt"
        assert resolve_store_path(config_path, "a.json") == tmp_path / "cfg" / "a.json"

    def test_absolute_kept(self, tmp_path: Path):
        absolute = tmp_path / "abs.json"
        assert resolve_store_path(Path("config.txt"), str(absolute)) == absolute


class TestOpenStoreGroup:
    """open_store_group 测试"""

    def test_opens_active_store(self, config_path: Path, store: JsonArrayStore):
        group = open_store_group(config_path)
        assert group.object_store.path == store.path
        assert group.id_allocator.config_path == config_path

    def test_missing_store_file(self, config_path: Path):
        """config pointer 指向不存在的 store"""
        with pytest.raises(InvalidConfigError):
            open_store_group(config_path)

    def test_missing_config(self, tmp_path: Path):
        with pytest.raises(InvalidConfigError):
            open_store_group(tmp_path / "config.txt")
