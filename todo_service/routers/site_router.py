"""
Site-level routes: greeting, page redirects and health check.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import BaseModel

from .. import __version__
from ..dependencies import get_todo_database, get_user_database
from ..repositories import TodoDatabase, UserDatabase

router = APIRouter(tags=["site"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str = "todo-service"
    version: str = __version__
    users: int
    todos: int


@router.get("/hello", response_class=PlainTextResponse, summary="Simple example route")
async def hello() -> str:
    return "Hello World"


@router.get("/users", include_in_schema=False)
async def users_page() -> RedirectResponse:
    """Redirect to the static users page."""
    return RedirectResponse(url="/users.html", status_code=status.HTTP_302_FOUND)


@router.get("/todos", include_in_schema=False)
async def todos_page() -> RedirectResponse:
    """Redirect to the static todos page."""
    return RedirectResponse(url="/todos.html", status_code=status.HTTP_302_FOUND)


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns 200 with the size of each loaded collection",
)
async def health_check(
    user_database: UserDatabase = Depends(get_user_database),
    todo_database: TodoDatabase = Depends(get_todo_database),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        users=user_database.size(),
        todos=todo_database.size(),
    )
