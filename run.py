"""Entry point for the Task Manager API.

Loads configuration from a ``.env`` file in the working directory (if
present), then serves the application with Uvicorn.  Supported
variables are listed in ``task_manager_api/app/core/config.py``; the
ones you will usually set are ``MONGO_URI`` and ``PORT``.

Usage:
    python run.py
"""
import asyncio
import logging

from dotenv import load_dotenv
from uvicorn import Config, Server

# Settings are read when the config module is imported, so the .env
# file has to be loaded before the application package.
load_dotenv()

from task_manager_api.app.core.config import settings  # noqa: E402
from task_manager_api.app.main import app  # noqa: E402

logger = logging.getLogger("task_manager_api")


async def log_when_listening(server: Server, port: int, poll_interval: float = 0.05) -> None:
    """Log once uvicorn has bound its socket.

    Returns silently if the server is told to exit first.  A failed bind
    makes uvicorn exit the process, so nothing is logged in that case.
    """
    while not server.started:
        if server.should_exit:
            return
        await asyncio.sleep(poll_interval)
    logger.info("Server is listening on port %s", port)


async def main() -> None:
    """Serve the API on ``HOST``:``PORT`` (default port 4000)."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await asyncio.gather(server.serve(), log_when_listening(server, settings.port))


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
