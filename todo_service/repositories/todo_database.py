"""
A fake "database" of todo info.

Rather than complicate things with a real database, the todos are read from a
JSON file at startup and this class provides database-like methods that let
the todo router "query" them.
"""

from typing import Callable, Dict, List, Optional, Sequence

from ..exceptions import BadRequestException
from ..logging_config import get_logger
from ..models import Todo
from .json_database import JsonDatabase, QueryParams

logger = get_logger(__name__)

STATUS_VALUES: Dict[str, bool] = {"complete": True, "incomplete": False}

ORDER_KEYS: Dict[str, Callable[[Todo], object]] = {
    "owner": lambda todo: todo.owner,
    "category": lambda todo: todo.category,
    "body": lambda todo: todo.body,
    "status": lambda todo: todo.status,
}


class TodoDatabase(JsonDatabase[Todo]):
    """In-memory collection of todos with query-parameter filtering."""

    record_type = Todo
    resource_name = "todo"

    def get_todo(self, todo_id: str) -> Optional[Todo]:
        """Get the single todo with the given id, or None."""
        return self.get(todo_id)

    def list_todos(self, query_params: QueryParams) -> List[Todo]:
        """
        Get all the todos satisfying the queries in the params.

        Supported keys, applied in this order: ``owner``, ``category``,
        ``status`` (complete/incomplete), ``contains`` (body substring),
        ``orderBy`` (owner/category/body/status) and ``limit``.

        Args:
            query_params: Map of query keys to the values supplied for them

        Returns:
            The matching todos

        Raises:
            BadRequestException: If status, orderBy or limit is invalid
        """
        filtered: Sequence[Todo] = self.records

        owner = self.first_value(query_params, "owner")
        if owner is not None:
            filtered = self.filter_todos_by_owner(filtered, owner)

        category = self.first_value(query_params, "category")
        if category is not None:
            filtered = self.filter_todos_by_category(filtered, category)

        status = self.first_value(query_params, "status")
        if status is not None:
            if status not in STATUS_VALUES:
                raise BadRequestException(
                    "status",
                    status,
                    f"Specified status '{status}' must be 'complete' or 'incomplete'",
                )
            filtered = self.filter_todos_by_status(filtered, STATUS_VALUES[status])

        contains = self.first_value(query_params, "contains")
        if contains is not None:
            filtered = self.filter_todos_by_body(filtered, contains)

        order_by = self.first_value(query_params, "orderBy")
        if order_by is not None:
            filtered = self.order_todos(filtered, order_by)

        limit = self.first_value(query_params, "limit")
        if limit is not None:
            filtered = self.limit_todos(filtered, self.parse_int("limit", limit))

        logger.debug(
            "Listed todos",
            params={key: list(values) for key, values in query_params.items()},
            matched=len(filtered),
        )
        return list(filtered)

    def filter_todos_by_owner(self, todos: Sequence[Todo], target_owner: str) -> List[Todo]:
        """Get all the todos from ``todos`` having the target owner."""
        return [todo for todo in todos if todo.owner == target_owner]

    def filter_todos_by_category(
        self, todos: Sequence[Todo], target_category: str
    ) -> List[Todo]:
        """Get all the todos from ``todos`` having the target category."""
        return [todo for todo in todos if todo.category == target_category]

    def filter_todos_by_status(self, todos: Sequence[Todo], complete: bool) -> List[Todo]:
        """Get all the todos from ``todos`` whose status matches ``complete``."""
        return [todo for todo in todos if todo.status is complete]

    def filter_todos_by_body(self, todos: Sequence[Todo], text: str) -> List[Todo]:
        """Get all the todos from ``todos`` whose body contains ``text``."""
        return [todo for todo in todos if text in todo.body]

    def order_todos(self, todos: Sequence[Todo], order_by: str) -> List[Todo]:
        """
        Sort todos ascending on one field.

        The sort is stable, so todos with equal keys keep their relative order.
        Incomplete todos sort before complete ones when ordering by status.

        Raises:
            BadRequestException: If ``order_by`` is not a sortable field
        """
        key = ORDER_KEYS.get(order_by)
        if key is None:
            raise BadRequestException(
                "orderBy",
                order_by,
                f"Specified orderBy '{order_by}' must be one of: {', '.join(ORDER_KEYS)}",
            )
        return sorted(todos, key=key)

    def limit_todos(self, todos: Sequence[Todo], limit: int) -> List[Todo]:
        """
        Keep only the first ``limit`` todos.

        Raises:
            BadRequestException: If ``limit`` is negative
        """
        if limit < 0:
            raise BadRequestException(
                "limit", limit, f"Specified limit '{limit}' must not be negative"
            )
        return list(todos[:limit])
