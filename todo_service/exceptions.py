"""
Custom exception classes for the todo service.

Provides specific exceptions for different error scenarios
so the HTTP layer can map each one to a status code.
"""

from typing import Any, Dict, Optional


class TodoServiceException(Exception):
    """
    Base exception for all todo service errors.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize todo service exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DataLoadException(TodoServiceException):
    """
    Exception raised when a JSON data file cannot be loaded.

    Used at startup when a data file is missing, unreadable or malformed.
    """

    def __init__(
        self,
        data_file: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize data load exception.

        Args:
            data_file: Path of the file that failed to load
            reason: Explanation of the failure
            details: Additional context about the error
        """
        self.data_file = data_file
        self.reason = reason
        message = f"Failed to load data from '{data_file}': {reason}"
        super().__init__(message, details)


class BadRequestException(TodoServiceException):
    """
    Exception raised when a query parameter is invalid.

    Mapped to HTTP 400 by the application.
    """

    def __init__(
        self,
        parameter: str,
        value: Any,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize bad request exception.

        Args:
            parameter: Name of the offending query parameter
            value: The invalid value
            reason: Message describing why the value was rejected
            details: Additional context about the error
        """
        self.parameter = parameter
        self.value = value
        self.reason = reason
        merged = {"parameter": parameter, "value": str(value)}
        merged.update(details or {})
        super().__init__(reason, merged)


class NotFoundException(TodoServiceException):
    """
    Exception raised when a record id does not exist.

    Mapped to HTTP 404 by the application.
    """

    def __init__(
        self,
        resource: str,
        identifier: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize not found exception.

        Args:
            resource: Kind of record that was requested (e.g. "todo")
            identifier: The id that was looked up
            details: Additional context about the error
        """
        self.resource = resource
        self.identifier = identifier
        merged = {"resource": resource, "id": identifier}
        merged.update(details or {})
        super().__init__(f"No {resource} with id {identifier} was found.", merged)
