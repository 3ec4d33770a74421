"""
Route overview.

Lists every route registered on the application, similar to a framework's
built-in route overview page. The path it is served on is configurable, so
the endpoint is registered by the application factory rather than through
a prefixed router.

Routes added with ``include_router`` are read from the routers themselves
(kept in ``app.state.overview_routers``), because the application's own
route list does not expose them as plain routes on every FastAPI release.
"""

from typing import Any, Iterable, List, Optional, Set, Tuple

from fastapi import APIRouter, Request
from pydantic import BaseModel
from starlette.routing import Mount


class RouteInfo(BaseModel):
    """A single registered route."""

    path: str
    methods: List[str]
    name: Optional[str] = None
    summary: Optional[str] = None


def _route_info(route: Any) -> Optional[RouteInfo]:
    if isinstance(route, Mount):
        return RouteInfo(path=(route.path or "") + "/*", methods=["GET"], name=route.name)

    path = getattr(route, "path", None)
    if path is None:
        return None

    return RouteInfo(
        path=path,
        methods=sorted(getattr(route, "methods", None) or []),
        name=getattr(route, "name", None),
        summary=getattr(route, "summary", None),
    )


def collect_routes(
    app_routes: Iterable[Any], routers: Iterable[APIRouter]
) -> List[RouteInfo]:
    """
    Build the overview from included routers and the application's own routes.

    Args:
        app_routes: The application's route list
        routers: Routers passed to ``include_router``

    Returns:
        One entry per distinct (path, methods) pair, router routes first
    """
    overview: List[RouteInfo] = []
    seen: Set[Tuple[str, Tuple[str, ...]]] = set()

    candidates = [route for router in routers for route in router.routes]
    candidates.extend(app_routes)

    for route in candidates:
        info = _route_info(route)
        if info is None:
            continue
        key = (info.path, tuple(info.methods))
        if key in seen:
            continue
        seen.add(key)
        overview.append(info)
    return overview


async def route_overview(request: Request) -> List[RouteInfo]:
    """List the application's routes."""
    routers = getattr(request.app.state, "overview_routers", [])
    return collect_routes(request.app.routes, routers)
