"""
Todo Service Package.

This package provides a small read-only web service over user and todo
records loaded from JSON files, with query-parameter filtering.
"""

__version__ = "1.0.0"
__description__ = "Read-only users and todos API"

# Export main components
from .app import app
from .config import settings

__all__ = [
    "app",
    "settings",
    "__version__",
]
