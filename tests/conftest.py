"""Pytest configuration for cache_control tests."""
import httpx
import pytest


@pytest.fixture
def sample_response() -> httpx.Response:
    """Response carrying Cache-Control on two field lines."""
    return httpx.Response(
        status_code=200,
        headers=[
            ("content-type", "application/json"),
            ("cache-control", "public, max-age=60"),
            ("Cache-Control", "must-revalidate"),
        ],
        content=b'{"success": true}',
    )


@pytest.fixture
def sample_request() -> httpx.Request:
    """Request carrying client-side Cache-Control directives."""
    return httpx.Request(
        "GET",
        "https://example.com/resource",
        headers={"Cache-Control": "max-stale, min-fresh=30, only-if-cached"},
    )
