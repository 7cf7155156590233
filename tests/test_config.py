"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from javadecl.config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_OUTPUT_PATH,
    default_config_path,
    default_output_path,
    load_config,
    parse_config,
)
from javadecl.errors import ConfigurationError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "filePath.json"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config / parse_config."""

    def test_reads_file_paths_in_order(self, tmp_path):
        path = _write(tmp_path, json.dumps({"filePaths": ["b/B.java", "a/A.java", "b/B.java"]}))

        config = load_config(path)

        assert config.file_paths == ["b/B.java", "a/A.java", "b/B.java"]
        assert config.source == path

    def test_paths_kept_as_written(self, tmp_path):
        path = _write(tmp_path, json.dumps({"filePaths": ["./A.java", "a//B.java"]}))

        assert load_config(path).file_paths == ["./A.java", "a//B.java"]

    def test_unrecognised_keys_ignored(self, tmp_path):
        path = _write(tmp_path, json.dumps({"filePaths": [], "comment": "nothing yet"}))

        assert load_config(path).file_paths == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path):
        path = _write(tmp_path, '{"filePaths": [')

        with pytest.raises(ConfigurationError, match="Malformed"):
            load_config(path)

    def test_missing_key(self, tmp_path):
        path = _write(tmp_path, json.dumps({"paths": ["A.java"]}))

        with pytest.raises(ConfigurationError, match="filePaths"):
            load_config(path)

    @pytest.mark.parametrize("value", [None, "A.java", [1, 2], {"a": "A.java"}])
    def test_file_paths_must_be_list_of_strings(self, value):
        with pytest.raises(ConfigurationError, match="list of strings"):
            parse_config({"filePaths": value})

    def test_top_level_must_be_object(self):
        with pytest.raises(ConfigurationError, match="JSON object"):
            parse_config(["A.java"])

    def test_env_override_for_config(self, tmp_path, monkeypatch):
        path = _write(tmp_path, json.dumps({"filePaths": ["X.java"]}))
        monkeypatch.setenv("JAVADECL_CONFIG", str(path))

        assert default_config_path() == path
        assert load_config().file_paths == ["X.java"]

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("JAVADECL_CONFIG", raising=False)
        monkeypatch.delenv("JAVADECL_OUTPUT", raising=False)

        assert default_config_path() == DEFAULT_CONFIG_PATH == Path("src/JSON/filePath.json")
        assert default_output_path() == DEFAULT_OUTPUT_PATH == Path("output.json")
