from __future__ import annotations

import logging
from pathlib import Path

import pytest

from webpath import TranslatorConfig, WebPathTranslator, create_translator, load_config
from webpath.config import env_bool


def test_load_config_defaults_to_wwwroot(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("WEBPATH_ROOT_DIR", raising=False)
    monkeypatch.delenv("WEBPATH_TRACE", raising=False)
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config == TranslatorConfig(root_dir=str(tmp_path / "wwwroot"), trace=False)


def test_load_config_reads_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WEBPATH_ROOT_DIR", f"  {tmp_path}  ")
    monkeypatch.setenv("WEBPATH_TRACE", "yes")

    config = load_config()

    assert config.root_dir == str(tmp_path)
    assert config.trace is True


def test_load_config_expands_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("WEBPATH_ROOT_DIR", "~/site")
    assert load_config().root_dir == str(tmp_path / "site")


def test_load_config_rejects_empty_root(monkeypatch) -> None:
    monkeypatch.setenv("WEBPATH_ROOT_DIR", "   ")
    with pytest.raises(RuntimeError, match="WEBPATH_ROOT_DIR must not be empty"):
        load_config()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("On", True), ("false", False), ("0", False), ("maybe", False), (None, False)],
)
def test_env_bool(monkeypatch, raw: str | None, expected: bool) -> None:
    if raw is None:
        monkeypatch.delenv("WEBPATH_TEST_FLAG", raising=False)
    else:
        monkeypatch.setenv("WEBPATH_TEST_FLAG", raw)
    assert env_bool("WEBPATH_TEST_FLAG") is expected


def test_create_translator_from_config(tmp_path: Path) -> None:
    svc = create_translator(TranslatorConfig(root_dir=str(tmp_path)))
    assert isinstance(svc, WebPathTranslator)
    assert svc.to_file_system_path("~/a/b") == str(tmp_path / "a" / "b")


def test_create_translator_attaches_logger_when_tracing(monkeypatch, tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="webpath.translator")
    monkeypatch.setenv("WEBPATH_ROOT_DIR", str(tmp_path))
    monkeypatch.setenv("WEBPATH_TRACE", "1")

    create_translator().to_file_system_path("~/a")

    messages = [record.getMessage() for record in caplog.records if record.name == "webpath.translator"]
    assert f"Web Root Path: '{tmp_path}'" in messages
    assert f"Web-Path '~/a' to '{tmp_path / 'a'}'" in messages


def test_create_translator_is_silent_without_tracing(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="webpath.translator")
    create_translator(TranslatorConfig(root_dir=str(tmp_path))).to_file_system_path("~/a")
    assert not [record for record in caplog.records if record.name == "webpath.translator"]
