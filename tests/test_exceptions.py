"""
Tests for custom exception classes.

Tests all custom exception types to ensure proper initialization
and error message formatting.
"""

from todo_service.exceptions import (
    BadRequestException,
    DataLoadException,
    NotFoundException,
    TodoServiceException,
)


def test_todo_service_exception_basic() -> None:
    """
    Test basic TodoServiceException initialization.

    Verifies that the base exception can be created with just a message.
    """
    exc = TodoServiceException("Test error")

    assert exc.message == "Test error"
    assert exc.details == {}
    assert str(exc) == "Test error"


def test_todo_service_exception_with_details() -> None:
    """Additional context can be attached to the exception."""
    details = {"code": "ERR001"}
    exc = TodoServiceException("Test error", details=details)

    assert exc.details == details


def test_data_load_exception() -> None:
    """
    Test DataLoadException message formatting.

    Verifies that the file path and reason are both part of the message.
    """
    exc = DataLoadException("/todos.json", "No such file or directory")

    assert exc.data_file == "/todos.json"
    assert exc.reason == "No such file or directory"
    assert "/todos.json" in exc.message
    assert "No such file or directory" in exc.message
    assert isinstance(exc, TodoServiceException)


def test_bad_request_exception() -> None:
    """
    Test BadRequestException initialization.

    The reason becomes the message and the parameter is recorded in details.
    """
    exc = BadRequestException("limit", "abc", "Specified limit 'abc' is bad")

    assert exc.parameter == "limit"
    assert exc.value == "abc"
    assert exc.message == "Specified limit 'abc' is bad"
    assert exc.details == {"parameter": "limit", "value": "abc"}


def test_bad_request_exception_merges_details() -> None:
    exc = BadRequestException("age", 3, "bad", details={"hint": "use digits"})

    assert exc.details == {"parameter": "age", "value": "3", "hint": "use digits"}


def test_not_found_exception() -> None:
    """
    Test NotFoundException message formatting.
    """
    exc = NotFoundException("todo", "abc123")

    assert exc.resource == "todo"
    assert exc.identifier == "abc123"
    assert exc.message == "No todo with id abc123 was found."
    assert exc.details == {"resource": "todo", "id": "abc123"}
