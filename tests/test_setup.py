from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

import flakeworks
from flakeworks import create_generator
from flakeworks.config import config, load_config
from flakeworks.utils.errors import InvalidConfigurationError
from flakeworks.utils.logging import setup_logging


def test_config_names() -> None:
    assert set(config) == {"development", "production", "testing"}
    assert config["development"].DEBUG is True
    assert config["production"].DEBUG is False


def test_create_generator_uses_testing_config() -> None:
    gen = create_generator("testing")
    assert gen.worker_id == 0
    assert gen.datacenter_id == 0
    assert gen.next_id() > 0


def test_create_generator_unknown_environment() -> None:
    with pytest.raises(KeyError):
        create_generator("staging")


def test_create_generator_rejects_bad_configured_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config["testing"], "WORKER_ID", 40)
    with pytest.raises(InvalidConfigurationError) as excinfo:
        create_generator("testing")
    assert excinfo.value.field == "worker_id"


def test_create_generator_reads_configured_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config["testing"], "WORKER_ID", 6)
    monkeypatch.setattr(config["testing"], "DATACENTER_ID", 11)
    gen = create_generator("testing")
    parts = flakeworks.decode_id(gen.next_id())
    assert (parts.worker_id, parts.datacenter_id) == (6, 11)


class _Settings:
    DEBUG = False
    LOG_TO_FILE = False
    LOG_PATH = ""


def test_setup_logging_console_only() -> None:
    logger = setup_logging(_Settings, logger_name="flakeworks.test.console")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_replaces_handlers() -> None:
    setup_logging(_Settings, logger_name="flakeworks.test.repeat")
    logger = setup_logging(_Settings, logger_name="flakeworks.test.repeat")
    assert len(logger.handlers) == 1


def test_setup_logging_to_file(tmp_path: Path) -> None:
    class FileSettings(_Settings):
        DEBUG = True
        LOG_TO_FILE = True
        LOG_PATH = str(tmp_path / "nested" / "ids.log")

    logger = setup_logging(FileSettings, logger_name="flakeworks.test.file")
    assert logger.level == logging.DEBUG
    assert (tmp_path / "nested").is_dir()
    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "nested" / "ids.log").read_text()
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []


# ---------- environment ----------

def test_load_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKER_ID", "7")
    monkeypatch.setenv("DATACENTER_ID", "3")
    monkeypatch.setenv("LOG_TO_FILE", "false")
    settings = load_config("production")
    assert (settings.WORKER_ID, settings.DATACENTER_ID) == (7, 3)
    assert settings.LOG_TO_FILE is False
    assert settings.DEBUG is False
    # the shared class is left untouched
    assert config["production"].WORKER_ID == 0


def test_load_config_rejects_non_integer_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKER_ID", "web-3")
    with pytest.raises(ValueError):
        load_config("development")


def test_testing_config_ignores_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKER_ID", "web-3")
    settings = load_config("testing")
    assert settings is config["testing"]
    assert create_generator("testing").worker_id == 0


def test_importing_generator_leaves_environment_alone(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("SOME_SECRET=leaked\n")
    root = Path(__file__).resolve().parents[1]
    env = {k: v for k, v in os.environ.items() if k != "SOME_SECRET"}
    env["WORKER_ID"] = "web-3"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(root), env.get("PYTHONPATH")]))
    script = (
        "import os, sys\n"
        "from flakeworks.ids import Generator\n"
        "print(os.environ.get('SOME_SECRET'))\n"
        "print('flakeworks.config' in sys.modules)\n"
    )

    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == ["None", "False"]
