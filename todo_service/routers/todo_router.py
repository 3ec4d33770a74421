"""
Todo API router.

Serves the todo collection, filtered and ordered with query parameters,
and single todos by id.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends

from ..dependencies import get_query_params, get_todo_database
from ..exceptions import NotFoundException
from ..logging_config import get_logger
from ..metrics import track_query_results
from ..models import ErrorResponse, Todo
from ..repositories import TodoDatabase

logger = get_logger(__name__)

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("/", include_in_schema=False)
@router.get(
    "",
    response_model=List[Todo],
    responses={400: {"description": "Invalid query parameter", "model": ErrorResponse}},
    summary="List todos",
    description="""
    List todos, optionally narrowed with query parameters.

    - `owner`: exact owner name
    - `category`: exact category
    - `status`: `complete` or `incomplete`
    - `contains`: substring of the todo body
    - `orderBy`: `owner`, `category`, `body` or `status`
    - `limit`: maximum number of todos to return
    """,
)
async def get_todos(
    query_params: Dict[str, List[str]] = Depends(get_query_params),
    database: TodoDatabase = Depends(get_todo_database),
) -> List[Todo]:
    todos = database.list_todos(query_params)
    track_query_results("todo", len(todos))
    return todos


@router.get("/{todo_id}/", include_in_schema=False)
@router.get(
    "/{todo_id}",
    response_model=Todo,
    responses={404: {"description": "Todo not found", "model": ErrorResponse}},
    summary="Get todo",
)
async def get_todo(
    todo_id: str,
    database: TodoDatabase = Depends(get_todo_database),
) -> Todo:
    """Get the single todo specified by the `todo_id` path parameter."""
    todo = database.get_todo(todo_id)
    if todo is None:
        logger.info("Todo not found", todo_id=todo_id)
        raise NotFoundException("todo", todo_id)
    return todo
