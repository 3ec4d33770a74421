"""
API routers for todo service endpoints.
"""

from . import overview_router, site_router, todo_router, user_router

__all__ = ["overview_router", "site_router", "todo_router", "user_router"]
