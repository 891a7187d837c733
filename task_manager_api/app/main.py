"""
Main entrypoint for the Task Manager API.

This module assembles the FastAPI application: logging, permissive
CORS, the routers and a lifespan that opens the MongoDB store on
startup and closes it on shutdown.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app`` so it can be served directly, e.g.::

    uvicorn task_manager_api.app.main:app --port 4000

``run.py`` at the repository root does the same after loading ``.env``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import TaskStore
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def open_store(app: FastAPI, settings: Settings) -> TaskStore:
    """Create the task store, attach it to ``app.state`` and ping it.

    Connection problems are logged and swallowed: the listener must
    come up even when MongoDB is unreachable, in which case the task
    endpoints answer 500 until the backend recovers.
    """
    store = TaskStore.from_settings(settings)
    app.state.task_store = store
    if store.connected:
        try:
            await store.ping()
        except Exception as exc:
            logger.error("MongoDB connection error: %s", exc)
        else:
            logger.info("Connected to MongoDB")
    return store


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the values read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that startup messages below are formatted.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = await open_store(app, settings)
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
