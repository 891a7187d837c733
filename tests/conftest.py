from typing import Any, Dict, List, Mapping, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from task_manager_api.app.core.config import Settings
from task_manager_api.app.core.db import get_task_store
from task_manager_api.app.main import create_app


class InMemoryTaskStore:
    """Dict-backed stand-in for ``TaskStore``.

    Ids are real ``ObjectId`` values and lookups parse the incoming id the
    same way the Mongo store does, so malformed ids raise ``InvalidId``.
    Setting ``fail_with`` makes every call raise that exception.
    """

    connected = True

    def __init__(self) -> None:
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self.fail_with: Optional[Exception] = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def ping(self) -> None:
        self._check()

    async def close(self) -> None:
        pass

    async def insert(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        self._check()
        stored = dict(document)
        stored["_id"] = ObjectId()
        self.documents[stored["_id"]] = stored
        return dict(stored)

    async def find_all(self) -> List[Dict[str, Any]]:
        self._check()
        return [dict(doc) for doc in self.documents.values()]

    async def find_by_id(self, task_id: str) -> Optional[Dict[str, Any]]:
        self._check()
        doc = self.documents.get(ObjectId(task_id))
        return dict(doc) if doc else None

    async def update_by_id(self, task_id: str, fields: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        self._check()
        doc = self.documents.get(ObjectId(task_id))
        if doc is None:
            return None
        doc.update(fields)
        return dict(doc)

    async def delete_by_id(self, task_id: str) -> Optional[Dict[str, Any]]:
        self._check()
        return self.documents.pop(ObjectId(task_id), None)


@pytest.fixture
def settings():
    return Settings(
        project_name="Task Manager Test",
        log_level="WARNING",
        mongo_uri="",
    )


@pytest.fixture
def store():
    return InMemoryTaskStore()


@pytest.fixture
def app(settings, store):
    application = create_app(settings)
    application.dependency_overrides[get_task_store] = lambda: store
    return application


@pytest.fixture
def client(app):
    # Not entered as a context manager: the lifespan (and its MongoDB
    # ping) does not run, the overridden store is used instead.
    return TestClient(app)
