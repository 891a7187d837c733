"""
Task endpoints.

Five handlers implementing create/list/get/update/delete over the task
collection.  There is no authentication and no validation beyond the
shape of ``TaskPayload``.  Each handler asks ``TaskService`` for a
result object and maps it to a response with ``_respond``:

* success → the record (201 for create, 200 otherwise);
* not found → 404 ``{"error": "Task not found"}``;
* failure → 500 ``{"error": "Internal Server Error"}``.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_manager_api.app.schemas.task import (
    ErrorResponse,
    MessageResponse,
    TaskPayload,
    TaskRead,
)
from task_manager_api.app.services.task_service import (
    TaskDeleted,
    TaskFound,
    TaskNotFound,
    TaskService,
    TasksFound,
    get_task_service,
)

TASK_NOT_FOUND = "Task not found"
INTERNAL_ERROR = "Internal Server Error"
TASK_DELETED = "Task deleted successfully"

ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
ITEM_ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    **ERROR_RESPONSES,
}

router = APIRouter()


def _respond(result: Any, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Map a service result to its HTTP response."""
    if isinstance(result, TaskFound):
        content: Any = result.task
    elif isinstance(result, TasksFound):
        content = result.tasks
    elif isinstance(result, TaskDeleted):
        content = MessageResponse(message=TASK_DELETED)
    elif isinstance(result, TaskNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": TASK_NOT_FOUND},
        )
    else:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR},
        )
    return JSONResponse(status_code=success_status, content=jsonable_encoder(content))


async def _payload_or_empty(request: Request, task_in: Optional[TaskPayload]) -> TaskPayload:
    """Default a missing body to ``{}`` but reject an explicit JSON ``null``.

    FastAPI hands an optional body parameter ``None`` in both cases; the
    raw bytes (already read and cached by FastAPI) tell them apart.
    """
    if task_in is not None:
        return task_in
    if await request.body():
        raise RequestValidationError(
            [
                {
                    "type": "model_attributes_type",
                    "loc": ("body",),
                    "msg": "Input should be a valid dictionary or object to extract fields from",
                    "input": None,
                }
            ]
        )
    return TaskPayload()


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_task(
    request: Request,
    task_in: Optional[TaskPayload] = None,
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    """Create a task; the response carries the id assigned by MongoDB.

    An empty body is treated as ``{}``; a JSON ``null`` body is rejected
    with 422.
    """
    payload = await _payload_or_empty(request, task_in)
    result = await service.create_task(payload)
    return _respond(result, status.HTTP_201_CREATED)


@router.get("", response_model=List[TaskRead], responses=ERROR_RESPONSES)
async def list_tasks(service: TaskService = Depends(get_task_service)) -> JSONResponse:
    """Return all tasks.  No filtering, no pagination."""
    result = await service.list_tasks()
    return _respond(result)


@router.get("/{task_id}", response_model=TaskRead, responses=ITEM_ERROR_RESPONSES)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    """Retrieve a single task.

    A malformed id is answered with 500 rather than 400, the same as
    any other backend error.
    """
    result = await service.get_task(task_id)
    return _respond(result)


@router.put("/{task_id}", response_model=TaskRead, responses=ITEM_ERROR_RESPONSES)
async def update_task(
    request: Request,
    task_id: str,
    task_in: Optional[TaskPayload] = None,
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    """Replace title and description of a task.

    Fields missing from the body are cleared, not preserved.
    """
    payload = await _payload_or_empty(request, task_in)
    result = await service.update_task(task_id, payload)
    return _respond(result)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    responses=ITEM_ERROR_RESPONSES,
)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    result = await service.delete_task(task_id)
    return _respond(result)
