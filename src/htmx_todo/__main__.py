from __future__ import annotations

import uvicorn

from htmx_todo.app import create_app
from htmx_todo.config import apply_env_overrides, configure_logging, load_config


def main() -> None:
    config = apply_env_overrides(load_config())
    configure_logging(config)

    uvicorn.run(
        create_app(config),
        host=config.network.bind_host,
        port=config.network.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
