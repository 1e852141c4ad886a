"""Entry point for the KMCA site API.

Builds the settings from the environment (and an optional ``.env``
file next to this script), creates the application and serves it
with Uvicorn.

Configuration such as ``PORT``, ``KMCA_API_SECRET`` and ``DATA_DIR``
should be placed in the environment or in ``.env``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from kmca_api.app.core.config import Settings
from kmca_api.app.main import create_app


async def run_api(settings: Settings) -> None:
    """Serve the API on ``settings.host:settings.port``."""
    app = create_app(settings)
    # log_config=None keeps uvicorn on the handlers set up by create_app.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger("kmca_api").info("[kmca] API server listening on http://localhost:%s", settings.port)
    await server.serve()


def main() -> None:
    settings = Settings.from_env()
    asyncio.run(run_api(settings))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
