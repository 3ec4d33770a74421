"""
Pydantic models for the records served by the todo service.

Records are validated once when their JSON file is loaded and are
immutable afterwards. Field aliases keep the ``_id`` key used by the
data files on both input and output.
"""

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """
    A single todo item.

    Attributes:
        id: Unique identifier (``_id`` in JSON)
        owner: Name of the person the todo belongs to
        status: True when the todo is complete
        body: Free text describing the todo
        category: Category label such as "homework" or "groceries"
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="_id", description="Unique todo identifier")
    owner: str = Field(..., description="Owner of the todo")
    status: bool = Field(..., description="True when the todo is complete")
    body: str = Field(..., description="Text of the todo")
    category: str = Field(..., description="Category of the todo")


class User(BaseModel):
    """A single user record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="_id", description="Unique user identifier")
    name: str = Field(..., description="Full name")
    age: int = Field(..., description="Age in years")
    company: str = Field(..., description="Employer")
    email: str = Field(..., description="Email address")


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    message: str
    details: dict = Field(default_factory=dict)
