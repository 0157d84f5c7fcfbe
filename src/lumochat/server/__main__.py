"""Run the LumoChat server: ``python -m lumochat.server [config.yaml]``."""

from __future__ import annotations

import sys

import uvicorn

from lumochat.config import RelayConfig
from lumochat.server.app import create_app


def main() -> None:
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    config = RelayConfig.load(config_path)
    app = create_app(config)
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower(),
    )


if __name__ == "__main__":
    main()
