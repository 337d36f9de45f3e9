"""Entry point for the Techinsight Hub API.

Launches the FastAPI application under Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); the MongoDB connection is configured with
``MONGODB_URI`` or ``DB_USERNAME``/``DB_PASSWORD``/``DB_HOST`` and
``DB_NAME``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from techinsight_api.app.core.config import settings
from techinsight_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
