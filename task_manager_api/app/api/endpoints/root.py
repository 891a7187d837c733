"""Root endpoint used as a liveness check."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def read_root() -> str:
    """Return a fixed greeting.  Does not touch the database."""
    return "Hello world"
