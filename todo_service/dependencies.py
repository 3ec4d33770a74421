"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from typing import TYPE_CHECKING, Dict, List, Optional

from fastapi import Request

if TYPE_CHECKING:
    from .repositories import TodoDatabase, UserDatabase

# Global database instances (set by main app)
_todo_database: Optional["TodoDatabase"] = None
_user_database: Optional["UserDatabase"] = None


def set_databases(
    user_database: Optional["UserDatabase"],
    todo_database: Optional["TodoDatabase"],
) -> None:
    """
    Set the global database instances.

    Called by main app during startup, and with None values on shutdown.
    """
    global _todo_database, _user_database
    _user_database = user_database
    _todo_database = todo_database


def get_todo_database() -> "TodoDatabase":
    """
    Get todo database instance for dependency injection.
    """
    if _todo_database is None:
        raise RuntimeError("Todo database not initialized")
    return _todo_database


def get_user_database() -> "UserDatabase":
    """
    Get user database instance for dependency injection.
    """
    if _user_database is None:
        raise RuntimeError("User database not initialized")
    return _user_database


def get_query_params(request: Request) -> Dict[str, List[str]]:
    """
    Collect the request query string as a map of key to all supplied values.
    """
    return {key: request.query_params.getlist(key) for key in request.query_params.keys()}
