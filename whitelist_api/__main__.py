"""Entrypoint: `python -m whitelist_api` serves on $HOST:$PORT until terminated."""

import logging
import sys

import uvicorn

from .core.config import ConfigError, Settings
from .main import create_app

logger = logging.getLogger("uvicorn.error")


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("%s", e)
        sys.exit(1)

    app = create_app(settings)

    # Config applies uvicorn's logging setup, so log the banner after it
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level="debug")
    server = uvicorn.Server(config)
    logger.info("Listening on %s:%s", settings.host, settings.port)
    # Bind failures make uvicorn log the error and exit(1)
    server.run()


if __name__ == "__main__":
    main()
