"""
In-memory JSON databases for users and todos.
"""

from .json_database import JsonDatabase, QueryParams
from .todo_database import TodoDatabase
from .user_database import UserDatabase

__all__ = ["JsonDatabase", "QueryParams", "TodoDatabase", "UserDatabase"]
