"""
MongoDB integration.

This module provides ``TaskStore``, a thin wrapper around the ``tasks``
collection of an ``AsyncMongoClient``.  One store is built during
application startup (see ``main.lifespan``), kept on ``app.state`` and
handed to request handlers through ``get_task_store``.  Nothing here is
a module‑level connection: tests and scripts construct their own store.

A store created without a usable connection string is *unconnected*.
It still exists so that the application can start and answer
``GET /``, but every collection operation raises
``StoreUnavailableError``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId
from fastapi import Request
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from .config import Settings

logger = logging.getLogger(__name__)

TASKS_COLLECTION = "tasks"


class StoreUnavailableError(RuntimeError):
    """Raised when the store has no MongoDB connection to work with."""


class TaskStore:
    """CRUD access to task documents.

    Documents are returned exactly as MongoDB stores them, ``_id``
    included; shaping them for the API is the service layer's job.
    Identifiers are parsed with :class:`bson.ObjectId`, so a malformed
    id raises ``bson.errors.InvalidId`` from the call that received it.
    """

    def __init__(
        self,
        client: Optional[AsyncMongoClient] = None,
        database_name: str = "task_manager",
        collection_name: str = TASKS_COLLECTION,
        collection: Optional[AsyncCollection] = None,
    ) -> None:
        self.client = client
        if collection is None and client is not None:
            database = client.get_default_database(default=database_name)
            collection = database[collection_name]
        self._collection = collection

    @classmethod
    def from_settings(cls, settings: Settings) -> "TaskStore":
        """Build a store from application settings.

        A missing or unparsable ``MONGO_URI`` is logged and yields an
        unconnected store instead of raising, so startup never fails
        because of the backend.
        """
        if not settings.mongo_uri:
            logger.error("MongoDB connection error: MONGO_URI is not set")
            return cls()
        # The URI parser raises ValueError for some malformed values (e.g. a
        # non-numeric port) and ConfigurationError for others.
        try:
            client: AsyncMongoClient = AsyncMongoClient(
                settings.mongo_uri,
                serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            )
            return cls(client=client, database_name=settings.mongo_db_name)
        except (PyMongoError, ValueError) as exc:
            logger.error("MongoDB connection error: %s", exc)
            return cls()

    @property
    def connected(self) -> bool:
        return self._collection is not None

    @property
    def collection(self) -> AsyncCollection:
        if self._collection is None:
            raise StoreUnavailableError("MongoDB is not configured")
        return self._collection

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def ping(self) -> None:
        """Round‑trip to the server; raises if it cannot be reached."""
        if self.client is None:
            raise StoreUnavailableError("MongoDB is not configured")
        await self.client.admin.command("ping")

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()

    # ------------------------------------------------------------------
    # Task documents
    # ------------------------------------------------------------------
    async def insert(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        """Insert ``document`` and return it with its assigned ``_id``."""
        stored = dict(document)
        result = await self.collection.insert_one(stored)
        stored["_id"] = result.inserted_id
        return stored

    async def find_all(self) -> List[Dict[str, Any]]:
        """Return every task document in the collection's natural order."""
        return await self.collection.find().to_list(None)

    async def find_by_id(self, task_id: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": ObjectId(task_id)})

    async def update_by_id(
        self, task_id: str, fields: Mapping[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Overwrite ``fields`` on one document and return it after the update."""
        return await self.collection.find_one_and_update(
            {"_id": ObjectId(task_id)},
            {"$set": dict(fields)},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_by_id(self, task_id: str) -> Optional[Dict[str, Any]]:
        """Remove one document and return it, or ``None`` if it did not exist."""
        return await self.collection.find_one_and_delete({"_id": ObjectId(task_id)})


def get_task_store(request: Request) -> TaskStore:
    """FastAPI dependency returning the store opened at startup.

    Requests served before startup has run (or in an application whose
    lifespan was never entered) get an unconnected store.
    """
    store = getattr(request.app.state, "task_store", None)
    if store is None:
        return TaskStore()
    return store
