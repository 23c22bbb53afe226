"""Pytest fixtures and test utilities for the package docs test suite."""

from typing import Any, Callable

import httpx
import pytest

from package_docs_mcp.dispatcher import Dispatcher
from package_docs_mcp.packages import NPMClient, PyPIClient

NPM_BASE = "https://npm.test"
PYPI_BASE = "https://pypi.test/pypi"


# ============================================================================
# UPSTREAM PAYLOAD FIXTURES
# ============================================================================


@pytest.fixture
def npm_packument() -> dict[str, Any]:
    """
    Realistic npm packument with every rendered field present.

    Returns:
        Dict shaped like GET https://registry.npmjs.org/left-pad
    """
    return {
        "name": "left-pad",
        "description": "String left pad",
        "dist-tags": {"latest": "1.3.0", "beta": "2.0.0-beta.1"},
        "versions": {
            "1.2.0": {"homepage": "https://old.example"},
            "1.3.0": {
                "name": "left-pad",
                "version": "1.3.0",
                "homepage": "https://github.com/stevemao/left-pad#readme",
                "repository": {
                    "type": "git",
                    "url": "git+https://github.com/stevemao/left-pad.git",
                },
                "keywords": ["leftpad", "left", "pad", "padding"],
            },
            "2.0.0-beta.1": {"keywords": ["beta"]},
        },
        "readme": "# left-pad\n\nString left pad.\n\n```js\nleftPad('foo', 5)\n```",
    }


@pytest.fixture
def pypi_project() -> dict[str, Any]:
    """
    Realistic PyPI JSON API document with every rendered field present.

    Returns:
        Dict shaped like GET https://pypi.org/pypi/requests/json
    """
    return {
        "info": {
            "name": "requests",
            "version": "2.32.3",
            "summary": "Python HTTP for Humans.",
            "home_page": "https://requests.readthedocs.io",
            "project_urls": {
                "Documentation": "https://requests.readthedocs.io",
                "Source": "https://github.com/psf/requests",
            },
            "keywords": "http, client",
            "description": "# Requests\n\n**Requests** is a simple HTTP library.",
        },
        "releases": {},
        "urls": [],
    }


# ============================================================================
# HTTP TRANSPORT FIXTURES
# ============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport():
    """
    Build a RecordingTransport from a handler.

    Returns:
        Callable: make_transport(handler) -> RecordingTransport
    """
    return RecordingTransport


@pytest.fixture
def make_dispatcher():
    """
    Build a Dispatcher whose clients share one RecordingTransport.

    Returns:
        Callable: make_dispatcher(handler) -> (Dispatcher, RecordingTransport)
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        dispatcher = Dispatcher(
            npm_client=NPMClient(NPM_BASE, transport=transport),
            pypi_client=PyPIClient(PYPI_BASE, transport=transport),
        )
        return dispatcher, transport

    return _make


@pytest.fixture
def registry_handler(npm_packument, pypi_project):
    """
    Handler serving the payload fixtures for left-pad and requests, 404 otherwise.

    Returns:
        Callable usable as a MockTransport handler
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == f"{NPM_BASE}/left-pad":
            return httpx.Response(200, json=npm_packument)
        if str(request.url) == f"{PYPI_BASE}/requests/json":
            return httpx.Response(200, json=pypi_project)
        return httpx.Response(404, json={"error": "Not found"})

    return _handler


@pytest.fixture
def failing_handler():
    """
    Build a handler that fails every request with a transport-level error.

    Returns:
        Callable: failing_handler(exc_type, message) -> handler
    """

    def _make(exc_type: type[httpx.TransportError], message: str):
        def _handler(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)

        return _handler

    return _make
