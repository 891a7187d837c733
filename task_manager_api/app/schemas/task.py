"""
Pydantic models for tasks.

A task is a title and a description, both optional; the service
performs no presence or format checks on either.  ``TaskPayload`` is
the body accepted by create and update, ``TaskRead`` is what every
endpoint returns.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field


class TaskPayload(BaseModel):
    """Request body for ``POST /tasks`` and ``PUT /tasks/{id}``.

    Missing fields default to ``None``.  On update that ``None`` is
    written to the document, so a field left out of the body is cleared.
    Unknown keys are ignored.
    """

    title: Optional[str] = Field(None, description="Task title")
    description: Optional[str] = Field(None, description="Task description")


class TaskRead(BaseModel):
    """Schema for a task returned by the API."""

    id: str = Field(..., description="Identifier assigned by MongoDB on creation")
    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "TaskRead":
        """Build a ``TaskRead`` from a raw MongoDB document."""
        return cls(
            id=str(document["_id"]),
            title=document.get("title"),
            description=document.get("description"),
        )


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str
