"""Tests for shared configuration utilities and types."""

import json
import os
from pathlib import Path
from unittest import mock

import pytest

from shared.config import CONFIG_FILENAME, find_config_file, load_section, parse_bool, read_env
from shared.types import DAY_ORDER, ContentFormat, LoadStatus, Weekday


class TestFindConfigFile:
    """Tests for find_config_file."""

    def test_found_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("content: {}\n")
        assert find_config_file(tmp_path) == tmp_path / CONFIG_FILENAME

    def test_found_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("content: {}\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == tmp_path / CONFIG_FILENAME

    def test_not_found(self, tmp_path: Path) -> None:
        with mock.patch.object(Path, "is_file", return_value=False):
            assert find_config_file(tmp_path) is None


class TestLoadSection:
    """Tests for load_section."""

    def test_sectioned_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("content:\n  content_root: /c\napi:\n  port: 1\n")
        assert load_section("api", path) == {"port": 1}
        assert load_section("content", path) == {"content_root": "/c"}

    def test_section_missing_from_sectioned_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("content:\n  content_root: /c\n")
        assert load_section("api", path) == {}

    def test_section_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("api: 8000\n")
        assert load_section("api", path) == {}

    def test_flat_file(self, tmp_path: Path) -> None:
        path = tmp_path / "api.yaml"
        path.write_text("port: 1\n")
        assert load_section("api", path) == {"port": 1}

    def test_missing_or_empty_file(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yaml"
        empty.write_text("")
        assert load_section("api", "/nonexistent/catalog.config.yaml") == {}
        assert load_section("api", empty) == {}

    def test_non_mapping_file_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("- port\n- host\n")
        with pytest.raises(ValueError):
            load_section("api", path)

    def test_discovers_file_from_start_path(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("api:\n  port: 2\n")
        nested = tmp_path / "site" / "pages"
        nested.mkdir(parents=True)
        assert load_section("api", start_path=nested) == {"port": 2}

    def test_discovers_file_from_cwd(self, isolated_cwd: Path) -> None:
        (isolated_cwd / CONFIG_FILENAME).write_text("api:\n  port: 3\n")
        assert load_section("api") == {"port": 3}

    def test_nothing_discovered(self, tmp_path: Path) -> None:
        with mock.patch.object(Path, "is_file", return_value=False):
            assert load_section("api", start_path=tmp_path) == {}


class TestHelpers:
    """Tests for read_env and parse_bool."""

    def test_read_env_skips_empty(self) -> None:
        env = {"CATALOG_A": "1", "CATALOG_B": ""}
        with mock.patch.dict(os.environ, env, clear=True):
            assert read_env({"a": "CATALOG_A", "b": "CATALOG_B", "c": "CATALOG_C"}) == {"a": "1"}

    @pytest.mark.parametrize("value", [True, "true", "True", "1", "yes"])
    def test_truthy(self, value) -> None:
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", [False, "false", "0", "no", ""])
    def test_falsy(self, value) -> None:
        assert parse_bool(value) is False


class TestTypes:
    """Tests for shared enums."""

    def test_day_order(self) -> None:
        assert [d.value for d in DAY_ORDER] == [
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ]

    def test_weekday_from_name(self) -> None:
        assert Weekday.from_name(" SUNDAY ") is Weekday.sunday

    def test_weekday_from_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            Weekday.from_name("Funday")

    def test_json_serializable(self) -> None:
        assert json.dumps([Weekday.friday, ContentFormat.json, LoadStatus.ok]) == (
            '["Friday", "json", "ok"]'
        )
