"""Entry point for the playlist web service.

Serves ``playlist_api.app.main:app`` with Uvicorn.  Host and port are
taken from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8080``); see ``playlist_api/app/core/config.py`` for
the other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from playlist_api.app.core.config import settings
from playlist_api.app.main import app


async def main() -> None:
    """Run the web service until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on http://%s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
