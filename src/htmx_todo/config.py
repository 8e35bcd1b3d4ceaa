from __future__ import annotations

import json
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from htmx_todo.render import DEFAULT_HTMX_INTEGRITY, DEFAULT_HTMX_SRC
from htmx_todo.store import MAX_TODO_ID

CONFIG_ENV = "HTMX_TODO_CONFIG"
BIND_ENV = "HTMX_TODO_BIND"
PORT_ENV = "HTMX_TODO_PORT"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class TodosConfig(BaseModel):
    default_text: str = Field(
        default="New todo",
        min_length=1,
        description="Text given to every todo created through POST /todos.",
    )
    max_id: int = Field(default=MAX_TODO_ID, ge=1)


class UiConfig(BaseModel):
    htmx_src: str = Field(default=DEFAULT_HTMX_SRC)
    htmx_integrity: str | None = Field(
        default=DEFAULT_HTMX_INTEGRITY,
        description="Subresource integrity hash for htmx_src; null disables the attribute.",
    )


class LoggingConfig(BaseModel):
    level: LogLevel = Field(default="INFO")
    file: str | None = Field(
        default=None, description="Optional log file; rotated when it grows past max_size_mb."
    )
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class TodoConfig(BaseModel):
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    todos: TodosConfig = Field(default_factory=TodosConfig)
    ui: UiConfig = Field(default_factory=UiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_config(
    path: Path | None = None, environ: dict[str, str] | None = None
) -> TodoConfig:
    """Load config from ``path`` or the file named by $HTMX_TODO_CONFIG.

    - If neither is given, or the file is missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    env = os.environ if environ is None else environ
    if path is None:
        raw = (env.get(CONFIG_ENV) or "").strip()
        if not raw:
            return TodoConfig()
        path = Path(raw).expanduser()

    if not path.exists():
        return TodoConfig()

    return TodoConfig.model_validate(_read_json(path))


def apply_env_overrides(
    config: TodoConfig, environ: dict[str, str] | None = None
) -> TodoConfig:
    """Apply $HTMX_TODO_BIND / $HTMX_TODO_PORT on top of the loaded config."""

    env = os.environ if environ is None else environ
    update: dict[str, Any] = {}

    host = (env.get(BIND_ENV) or "").strip()
    if host:
        update["bind_host"] = host

    port = (env.get(PORT_ENV) or "").strip()
    if port:
        update["port"] = port

    if not update:
        return config

    network = NetworkConfig.model_validate(config.network.model_dump() | update)
    return config.model_copy(update={"network": network})


def configure_logging(config: TodoConfig) -> None:
    root = logging.getLogger()
    root.setLevel(config.logging.level)
    formatter = logging.Formatter(LOG_FORMAT)

    # Avoid adding duplicate handlers if reloaded
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    if config.logging.file and not any(
        isinstance(h, RotatingFileHandler) for h in root.handlers
    ):
        log_path = Path(config.logging.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.logging.max_size_mb * 1024 * 1024,
            backupCount=config.logging.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
