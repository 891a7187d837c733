"""
Service layer for tasks.

``TaskService`` performs exactly one store call per operation and turns
its outcome into an explicit result object:

* ``TaskFound`` / ``TasksFound`` / ``TaskDeleted`` on success;
* ``TaskNotFound`` when the id matches no document;
* ``TaskFailure`` for anything else the store raises (malformed ids,
  connectivity errors, an unconfigured backend).

Failures are logged here with their traceback.  Handlers only ever see
result objects and never need a ``try`` block.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Union

from fastapi import Depends

from task_manager_api.app.core.db import TaskStore, get_task_store
from task_manager_api.app.schemas.task import TaskPayload, TaskRead

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskFound:
    task: TaskRead


@dataclass(frozen=True)
class TasksFound:
    tasks: List[TaskRead]


@dataclass(frozen=True)
class TaskDeleted:
    task_id: str


@dataclass(frozen=True)
class TaskNotFound:
    task_id: str


@dataclass(frozen=True)
class TaskFailure:
    """Any error other than a missing document."""

    reason: str


TaskResult = Union[TaskFound, TaskNotFound, TaskFailure]
TaskListResult = Union[TasksFound, TaskFailure]
TaskDeleteResult = Union[TaskDeleted, TaskNotFound, TaskFailure]


def _failure(operation: str, exc: Exception) -> TaskFailure:
    logger.error("Task %s failed: %s", operation, exc, exc_info=exc)
    return TaskFailure(reason=f"{type(exc).__name__}: {exc}")


class TaskService:
    """CRUD operations over the task store."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    async def create_task(self, data: TaskPayload) -> Union[TaskFound, TaskFailure]:
        """Insert a new task and return it with its assigned id."""
        try:
            document = await self.store.insert(data.model_dump())
        except Exception as exc:
            return _failure("create", exc)
        task = TaskRead.from_document(document)
        logger.info("Created task %s", task.id)
        return TaskFound(task)

    async def list_tasks(self) -> TaskListResult:
        """Return every task, unfiltered, in the backend's order."""
        try:
            documents = await self.store.find_all()
        except Exception as exc:
            return _failure("list", exc)
        return TasksFound([TaskRead.from_document(doc) for doc in documents])

    async def get_task(self, task_id: str) -> TaskResult:
        try:
            document = await self.store.find_by_id(task_id)
        except Exception as exc:
            return _failure("get", exc)
        if document is None:
            return TaskNotFound(task_id)
        return TaskFound(TaskRead.from_document(document))

    async def update_task(self, task_id: str, data: TaskPayload) -> TaskResult:
        """Overwrite title and description of an existing task.

        Both fields are written, so a value missing from ``data`` clears
        the stored one.  Returns the task as it is after the update.
        """
        try:
            document = await self.store.update_by_id(task_id, data.model_dump())
        except Exception as exc:
            return _failure("update", exc)
        if document is None:
            return TaskNotFound(task_id)
        logger.info("Updated task %s", task_id)
        return TaskFound(TaskRead.from_document(document))

    async def delete_task(self, task_id: str) -> TaskDeleteResult:
        try:
            document = await self.store.delete_by_id(task_id)
        except Exception as exc:
            return _failure("delete", exc)
        if document is None:
            return TaskNotFound(task_id)
        logger.info("Deleted task %s", task_id)
        return TaskDeleted(task_id)


def get_task_service(store: TaskStore = Depends(get_task_store)) -> TaskService:
    """FastAPI dependency building a service around the shared store."""
    return TaskService(store)
