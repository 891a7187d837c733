"""
Top‑level router.

Aggregates the endpoint routers.  The task routes declare paths
relative to their resource, so the ``/tasks`` prefix is applied here.
"""

from fastapi import APIRouter

from .endpoints import root, tasks

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
