"""
Todo Service Tests - Test Configuration.

Provides pytest fixtures for the bundled JSON databases and a test client
running the full application lifespan.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import pytest
from fastapi.testclient import TestClient

from todo_service.app import app
from todo_service.config import DATA_PATH
from todo_service.repositories import TodoDatabase, UserDatabase

TODO_DATA_FILE = DATA_PATH / "todos.json"
USER_DATA_FILE = DATA_PATH / "users.json"


@pytest.fixture(scope="session")
def todo_database() -> TodoDatabase:
    """Todo database loaded from the bundled data file."""
    return TodoDatabase(TODO_DATA_FILE)


@pytest.fixture(scope="session")
def user_database() -> UserDatabase:
    """User database loaded from the bundled data file."""
    return UserDatabase(USER_DATA_FILE)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """
    Test client with the application lifespan running.

    Entering the client as a context manager runs startup, which loads
    both databases from the configured files.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_todos() -> List[Dict[str, Any]]:
    """A handful of todo records in the on-disk JSON shape."""
    return [
        {
            "_id": "todo-1",
            "owner": "Fry",
            "status": False,
            "body": "Buy milk",
            "category": "groceries",
        },
        {
            "_id": "todo-2",
            "owner": "Blanche",
            "status": True,
            "body": "Write the essay",
            "category": "homework",
        },
        {
            "_id": "todo-3",
            "owner": "Fry",
            "status": True,
            "body": "Beat level two",
            "category": "video games",
        },
    ]


@pytest.fixture
def sample_todo_file(tmp_path: Path, sample_todos: List[Dict[str, Any]]) -> Path:
    """The sample todos written to a temporary JSON file."""
    path = tmp_path / "todos.json"
    path.write_text(json.dumps(sample_todos), encoding="utf-8")
    return path
