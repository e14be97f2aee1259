"""Tests for the input loader."""

import tempfile
from pathlib import Path

import pytest

from ini_gen.errors import LoadError, SchemaError
from ini_gen.loader import detect_format, load_config


def _write(tmpdir, name, text):
    path = Path(tmpdir) / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.json", '{"db": {"host": "localhost", "port": 5432}}')
        assert load_config(path) == {"db": {"host": "localhost", "port": 5432}}


def test_load_json_with_bom():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "cfg.json"
        path.write_bytes(b"\xef\xbb\xbf" + b'{"a": {"b": 1}}')
        assert load_config(path) == {"a": {"b": 1}}


def test_load_toml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.toml", '[server]\nhost = "0.0.0.0"\nenable_ssl = false\n')
        assert load_config(path) == {"server": {"host": "0.0.0.0", "enable_ssl": False}}


def test_load_yaml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.yml", "logging:\n  level: info\n  path: /var/log/app.log\n")
        assert load_config(path) == {"logging": {"level": "info", "path": "/var/log/app.log"}}


def test_yaml_keeps_file_order():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.yaml", "zeta:\n  k: 1\nalpha:\n  k: 2\n")
        assert list(load_config(path)) == ["zeta", "alpha"]


def test_explicit_format_overrides_suffix():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.txt", '{"a": {"b": 1}}')
        assert load_config(path, fmt="json") == {"a": {"b": 1}}


def test_missing_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(LoadError, match="No such file"):
            load_config(Path(tmpdir) / "missing.json")


def test_malformed_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.json", '{"a": ')
        with pytest.raises(LoadError, match="cannot parse"):
            load_config(path)


def test_malformed_toml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.toml", "[a\nb = ")
        with pytest.raises(LoadError):
            load_config(path)


def test_malformed_yaml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.yaml", "a: [1, 2\n")
        with pytest.raises(LoadError):
            load_config(path)


def test_top_level_list_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.json", "[1, 2, 3]")
        with pytest.raises(SchemaError, match="list"):
            load_config(path)


def test_empty_yaml_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.yaml", "")
        with pytest.raises(SchemaError):
            load_config(path)


def test_detect_format_by_suffix():
    assert detect_format(Path("a.JSON")) == "json"
    assert detect_format(Path("a.toml")) == "toml"
    assert detect_format(Path("a.yml")) == "yaml"


def test_detect_format_unknown_suffix():
    with pytest.raises(LoadError, match="cannot tell the format"):
        detect_format(Path("a.lua"))


def test_detect_format_unsupported():
    with pytest.raises(LoadError, match="unsupported input format"):
        detect_format(Path("a.json"), fmt="xml")


def test_detect_format_from_settings(isolated_settings):
    isolated_settings.write_text('[input]\ndefault_format = "yaml"\n')
    assert detect_format(Path("a.conf")) == "yaml"


def test_deeply_nested_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "cfg.json", "[" * 100000 + "]" * 100000)
        with pytest.raises(LoadError, match="cannot parse"):
            load_config(path)
