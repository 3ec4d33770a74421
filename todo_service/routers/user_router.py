"""
User API router.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends

from ..dependencies import get_query_params, get_user_database
from ..exceptions import NotFoundException
from ..metrics import track_query_results
from ..models import ErrorResponse, User
from ..repositories import UserDatabase

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/", include_in_schema=False)
@router.get(
    "",
    response_model=List[User],
    responses={400: {"description": "Invalid query parameter", "model": ErrorResponse}},
    summary="List users",
    description="List users, optionally filtered by `age` and `company`.",
)
async def get_users(
    query_params: Dict[str, List[str]] = Depends(get_query_params),
    database: UserDatabase = Depends(get_user_database),
) -> List[User]:
    users = database.list_users(query_params)
    track_query_results("user", len(users))
    return users


@router.get("/{user_id}/", include_in_schema=False)
@router.get(
    "/{user_id}",
    response_model=User,
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Get user",
)
async def get_user(
    user_id: str,
    database: UserDatabase = Depends(get_user_database),
) -> User:
    user = database.get_user(user_id)
    if user is None:
        raise NotFoundException("user", user_id)
    return user
