from pathlib import Path

import pytest
from pydantic import ValidationError

from async_linq.conf.sequence_conf import (
    DEFAULT_CONF,
    SequenceConf,
    read_conf,
)
from async_linq.utils.checked import INT32_MAX


def test_default_conf():
    assert DEFAULT_CONF.max_index == INT32_MAX


def test_read_conf(tmp_path: Path):
    path = tmp_path / "sequence.yaml"
    path.write_text("max_index: 100\n")

    assert read_conf(SequenceConf, path) == SequenceConf(max_index=100)


def test_read_empty_conf(tmp_path: Path):
    path = tmp_path / "sequence.yaml"
    path.write_text("")

    assert read_conf(SequenceConf, path) == DEFAULT_CONF


def test_read_conf_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAX_INDEX", "7")
    path = tmp_path / "sequence.yaml"
    path.write_text("max_index: !env MAX_INDEX\n")

    assert read_conf(SequenceConf, path).max_index == 7


def test_read_conf_env_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("MAX_INDEX", raising=False)
    path = tmp_path / "sequence.yaml"
    path.write_text("max_index: !env MAX_INDEX:42\n")

    assert read_conf(SequenceConf, path).max_index == 42


def test_read_conf_missing_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("MAX_INDEX", raising=False)
    path = tmp_path / "sequence.yaml"
    path.write_text("max_index: !env MAX_INDEX\n")

    with pytest.raises(KeyError):
        read_conf(SequenceConf, path)


def test_invalid_conf(tmp_path: Path):
    path = tmp_path / "sequence.yaml"
    path.write_text("max_index: 0\n")

    with pytest.raises(ValidationError):
        read_conf(SequenceConf, path)


def test_read_conf_with_yaml_include(tmp_path: Path):
    (tmp_path / "inc.yaml").write_text("12\n")
    path = tmp_path / "main.yaml"
    path.write_text("max_index: !include inc.yaml\n")

    assert read_conf(SequenceConf, path).max_index == 12


def test_read_conf_with_json_include(tmp_path: Path):
    (tmp_path / "sequence.json").write_text('{"max_index": 9}')
    path = tmp_path / "main.yaml"
    path.write_text("!include sequence.json\n")

    assert read_conf(SequenceConf, path) == SequenceConf(max_index=9)


def test_read_conf_with_text_include(tmp_path: Path):
    (tmp_path / "max_index.txt").write_text("5")
    path = tmp_path / "main.yaml"
    path.write_text("max_index: !include max_index.txt\n")

    assert read_conf(SequenceConf, path).max_index == 5
