"""
tests/conftest.py

Shared pytest fixtures for the unit test suite.
All HTTP fixtures use respx.mock, so no real network calls are made unless a
test deliberately talks to localhost.
"""

from __future__ import annotations

import socket

import httpx
import pytest
import respx

# ---------------------------------------------------------------------------
# HTTP mock fixture — intercepts all httpx calls
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_http():
    """
    Yields a respx router that intercepts all httpx.AsyncClient calls.

    Use this fixture wherever the resolver would normally make an outbound
    request. Requests to routes that were not registered fail the test.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ---------------------------------------------------------------------------
# Shared httpx.AsyncClient fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
async def http_client():
    """
    Yields a real httpx.AsyncClient instance for use in tests.

    Pair with the mock_http fixture so all requests are intercepted by respx.
    The client is closed after each test.
    """
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture()
def closed_port() -> int:
    """Returns a localhost port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
