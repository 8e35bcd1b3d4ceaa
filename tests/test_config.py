from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from pydantic import ValidationError

from htmx_todo.config import (
    TodoConfig,
    apply_env_overrides,
    configure_logging,
    load_config,
)


def test_load_config_defaults_when_unset() -> None:
    cfg = load_config(environ={})
    assert isinstance(cfg, TodoConfig)
    assert cfg.network.bind_host == "127.0.0.1"
    assert cfg.network.port == 8080
    assert cfg.todos.default_text == "New todo"


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path / "nope.json") == TodoConfig()


def test_load_config_from_env_path(tmp_path: Path) -> None:
    path = tmp_path / "todo.json"
    path.write_text(json.dumps({"network": {"port": 9000}}), encoding="utf-8")

    cfg = load_config(environ={"HTMX_TODO_CONFIG": str(path)})
    assert cfg.network.port == 9000


def test_load_config_validation_error(tmp_path: Path) -> None:
    path = tmp_path / "todo.json"
    path.write_text(json.dumps({"network": {"port": "not-an-int"}}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(path)


def test_empty_default_text_rejected() -> None:
    with pytest.raises(ValidationError):
        TodoConfig.model_validate({"todos": {"default_text": ""}})


def test_apply_env_overrides() -> None:
    cfg = apply_env_overrides(
        TodoConfig(), {"HTMX_TODO_BIND": "0.0.0.0", "HTMX_TODO_PORT": "8181"}
    )
    assert cfg.network.bind_host == "0.0.0.0"
    assert cfg.network.port == 8181


def test_apply_env_overrides_validates_port() -> None:
    with pytest.raises(ValidationError):
        apply_env_overrides(TodoConfig(), {"HTMX_TODO_PORT": "70000"})


def test_configure_logging_adds_file_handler_once(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "todo.log"
    cfg = TodoConfig.model_validate({"logging": {"file": str(log_file)}})
    root = logging.getLogger()
    before = list(root.handlers)

    try:
        configure_logging(cfg)
        configure_logging(cfg)
        rotating = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert len(rotating) == 1
        assert log_file.parent.is_dir()
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        TodoConfig.model_validate({"logging": {"level": "verbose"}})


def test_log_level_is_case_insensitive() -> None:
    cfg = TodoConfig.model_validate({"logging": {"level": "debug"}})
    assert cfg.logging.level == "DEBUG"


def test_apply_env_overrides_non_numeric_port() -> None:
    with pytest.raises(ValidationError):
        apply_env_overrides(TodoConfig(), {"HTMX_TODO_PORT": "http"})
