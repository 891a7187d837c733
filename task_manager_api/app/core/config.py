"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field except
the MongoDB connection string, which must be supplied for the task
endpoints to reach a backend.  ``run.py`` loads a ``.env`` file into
the environment before this module is imported.
"""

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Task Manager API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Listener address used by ``run.py``.  The port falls back to 4000
    # when ``PORT`` is unset.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 4000))

    # MongoDB connection string, e.g. ``mongodb://localhost:27017/tasks``.
    # When the URI names a database it wins over ``mongo_db_name``.
    mongo_uri: str = field(default_factory=lambda: os.getenv("MONGO_URI", ""))
    mongo_db_name: str = field(default_factory=lambda: os.getenv("MONGO_DB_NAME", "task_manager"))
    mongo_timeout_ms: int = field(default_factory=lambda: _env_int("MONGO_TIMEOUT_MS", 5000))


# Instantiated once at import so other modules share the same values.
# Environment variables must be set before importing this module.
settings = Settings()
