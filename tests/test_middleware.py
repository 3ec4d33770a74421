"""
Tests for the request middleware.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI
from fastapi.testclient import TestClient

from todo_service.middleware import PrometheusMiddleware, RequestLoggingMiddleware


def _build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/items/{item_id}")
    async def read_item(item_id: str) -> Dict[str, str]:
        return {"item_id": item_id}

    return app


def test_slow_requests_are_logged(caplog) -> None:
    app = _build_app()
    app.add_middleware(RequestLoggingMiddleware, slow_request_threshold_ms=0.0)

    with caplog.at_level(logging.WARNING):
        response = TestClient(app).get("/items/1")

    assert response.status_code == 200
    assert "Slow request detected" in caplog.text


def test_fast_requests_are_not_logged(caplog) -> None:
    app = _build_app()
    app.add_middleware(RequestLoggingMiddleware, slow_request_threshold_ms=60000.0)

    with caplog.at_level(logging.WARNING):
        TestClient(app).get("/items/1")

    assert "Slow request detected" not in caplog.text


def test_prometheus_middleware_uses_route_template() -> None:
    calls: List[Dict[str, Any]] = []

    def track(**kwargs: Any) -> None:
        calls.append(kwargs)

    app = _build_app()
    app.add_middleware(PrometheusMiddleware, track_func=track)

    TestClient(app).get("/items/abc")
    TestClient(app).get("/nowhere")

    assert calls[0]["endpoint"] == "/items/{item_id}"
    assert calls[0]["method"] == "GET"
    assert calls[0]["status_code"] == 200
    assert calls[0]["duration"] >= 0
    assert calls[1]["endpoint"] == "unmatched"
    assert calls[1]["status_code"] == 404


def test_request_logging_sets_header() -> None:
    app = _build_app()
    app.add_middleware(RequestLoggingMiddleware)

    response = TestClient(app).get("/items/1", headers={"X-Request-ID": "abc"})

    assert response.headers["X-Request-ID"] == "abc"
