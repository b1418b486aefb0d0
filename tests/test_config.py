"""Tests for gocompile.config."""

from pathlib import Path

import pytest

from gocompile.config import DEFAULT_CONFIG, ConfigError, find_config, load_config, resolve_config


class TestResolveConfig:
    def test_none_returns_defaults(self) -> None:
        assert resolve_config(None) == DEFAULT_CONFIG

    def test_defaults_are_copied(self) -> None:
        cfg = resolve_config(None)
        cfg["build_flags"].append("-x")
        assert DEFAULT_CONFIG["build_flags"] == []

    def test_overrides_and_unknown_keys(self) -> None:
        cfg = resolve_config({"build_dir": "dist", "version": 1.5, "colour": "blue"})
        assert cfg["build_dir"] == "dist"
        assert cfg["version"] == "1.5"
        assert "colour" not in cfg

    def test_zip_accepts_yes_no_strings(self) -> None:
        assert resolve_config({"zip": "y"})["zip"] is True
        assert resolve_config({"zip": "no"})["zip"] is False

    def test_build_flags_string_is_split(self) -> None:
        assert resolve_config({"build_flags": "-trimpath -v"})["build_flags"] == ["-trimpath", "-v"]

    def test_build_flags_string_keeps_quoted_values(self) -> None:
        cfg = resolve_config({"build_flags": "-trimpath -ldflags='-s -w'"})
        assert cfg["build_flags"] == ["-trimpath", "-ldflags=-s -w"]

    def test_build_flags_unbalanced_quote_raises(self) -> None:
        with pytest.raises(ConfigError, match="build_flags"):
            resolve_config({"build_flags": "-ldflags='-s"})

    def test_invalid_types_raise(self) -> None:
        with pytest.raises(ConfigError):
            resolve_config({"zip": "maybe"})
        with pytest.raises(ConfigError):
            resolve_config({"build_flags": [1, 2]})
        with pytest.raises(ConfigError):
            resolve_config({"build_dir": ["a"]})


class TestLoadConfig:
    def test_loads_yaml(self, tmp_path: Path) -> None:
        p = tmp_path / "gocompile.yaml"
        p.write_text("name_format: '2'\nzip: true\nbuild_flags:\n  - -trimpath\n")
        cfg = load_config(p)
        assert cfg["name_format"] == "2"
        assert cfg["zip"] is True
        assert cfg["build_flags"] == ["-trimpath"]
        assert cfg["build_dir"] == "build"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        p = tmp_path / "gocompile.yaml"
        p.write_text("")
        assert load_config(p) == DEFAULT_CONFIG

    def test_none_gives_defaults(self) -> None:
        assert load_config(None) == DEFAULT_CONFIG

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        p = tmp_path / "gocompile.yaml"
        p.write_text("build_dir: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(p)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        p = tmp_path / "gocompile.yaml"
        p.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(p)


def test_find_config(tmp_path: Path) -> None:
    assert find_config(tmp_path) is None
    (tmp_path / "gocompile.yaml").write_text("zip: false\n")
    assert find_config(tmp_path) == tmp_path / "gocompile.yaml"
