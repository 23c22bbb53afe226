"""Tests for the dispatch-fetch-render pipeline."""

import asyncio

import httpx
import pytest

from package_docs_mcp.dispatcher import Dispatcher
from package_docs_mcp.errors import ErrorKind, PackageNotFoundError
from package_docs_mcp.results import ToolResult


class StubClient:
    """Registry client double returning a fixed object or raising."""

    registry_name = "stub"

    def __init__(self, result=None, exc: BaseException | None = None):
        self.result = result
        self.exc = exc
        self.calls: list[str] = []

    async def fetch(self, package_name: str):
        self.calls.append(package_name)
        if self.exc is not None:
            raise self.exc
        return self.result


# ============================================================================
# CAPABILITY LISTING
# ============================================================================


def test_list_capabilities_has_one_entry_per_operation(make_dispatcher, registry_handler):
    dispatcher, _ = make_dispatcher(registry_handler)

    listing = dispatcher.list_capabilities()

    names = [entry["name"] for entry in listing]
    assert names == ["get_npm_docs", "get_pypi_docs"]
    for entry in listing:
        assert set(entry) == {"name", "description", "inputSchema"}
        assert entry["inputSchema"]["required"] == ["package_name"]
        assert entry["inputSchema"]["properties"]["package_name"]["type"] == "string"


# ============================================================================
# SUCCESS PATHS
# ============================================================================


@pytest.mark.asyncio
async def test_npm_invocation_renders_document(make_dispatcher, registry_handler):
    dispatcher, transport = make_dispatcher(registry_handler)

    result = await dispatcher.invoke("get_npm_docs", {"package_name": "left-pad"})

    assert not result.is_error
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.text.startswith("# left-pad v1.3.0\n\nString left pad\n\n")
    assert "## Repository\nhttps://github.com/stevemao/left-pad.git\n\n" in result.text
    assert "## Keywords\nleftpad, left, pad, padding\n\n" in result.text
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_pypi_invocation_renders_document(make_dispatcher, registry_handler):
    dispatcher, transport = make_dispatcher(registry_handler)

    result = await dispatcher.invoke("get_pypi_docs", {"package_name": "requests"})

    assert not result.is_error
    assert result.text.startswith("# requests v2.32.3\n\nPython HTTP for Humans.\n\n")
    assert (
        "## Project Links\n"
        "- Documentation: https://requests.readthedocs.io\n"
        "- Source: https://github.com/psf/requests\n\n"
    ) in result.text
    assert str(transport.requests[0].url).endswith("/requests/json")


@pytest.mark.asyncio
async def test_repeated_invocations_are_independent(make_dispatcher, registry_handler):
    """No caching: each invocation performs its own fetch and yields identical output."""
    dispatcher, transport = make_dispatcher(registry_handler)

    first = await dispatcher.invoke("get_npm_docs", {"package_name": "left-pad"})
    second = await dispatcher.invoke("get_npm_docs", {"package_name": "left-pad"})

    assert first.text == second.text
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_concurrent_invocations(make_dispatcher, registry_handler):
    dispatcher, _ = make_dispatcher(registry_handler)

    npm, pypi = await asyncio.gather(
        dispatcher.invoke("get_npm_docs", {"package_name": "left-pad"}),
        dispatcher.invoke("get_pypi_docs", {"package_name": "requests"}),
    )

    assert npm.text.startswith("# left-pad")
    assert pypi.text.startswith("# requests")


# ============================================================================
# VALIDATION FAILURES (no network)
# ============================================================================


@pytest.mark.asyncio
async def test_unknown_operation_is_method_not_found(make_dispatcher, registry_handler):
    dispatcher, transport = make_dispatcher(registry_handler)

    result = await dispatcher.invoke("get_cargo_docs", {"package_name": "serde"})

    assert result.is_error
    assert result.error.kind is ErrorKind.METHOD_NOT_FOUND
    assert result.error.message == "Unknown tool: get_cargo_docs"
    assert transport.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments",
    [
        None,
        {},
        {"package_name": None},
        {"package_name": 42},
        {"package_name": ""},
        ["left-pad"],
    ],
)
async def test_invalid_arguments_are_rejected(make_dispatcher, registry_handler, arguments):
    dispatcher, transport = make_dispatcher(registry_handler)

    result = await dispatcher.invoke("get_npm_docs", arguments)

    assert result.is_error
    assert result.error.kind is ErrorKind.INVALID_PARAMS
    assert "package_name" in result.error.message or "object" in result.error.message
    assert transport.requests == []


@pytest.mark.asyncio
async def test_whitespace_name_is_forwarded_verbatim():
    npm = StubClient(exc=PackageNotFoundError("npm", "Request failed with status code 404", 404))
    dispatcher = Dispatcher(npm_client=npm, pypi_client=StubClient())

    result = await dispatcher.invoke("get_npm_docs", {"package_name": "   "})

    assert npm.calls == ["   "]
    assert result.error.kind is ErrorKind.PACKAGE_NOT_FOUND


# ============================================================================
# UPSTREAM FAILURES
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation, label", [("get_npm_docs", "npm"), ("get_pypi_docs", "PyPI")]
)
async def test_unknown_package_is_error_not_empty_document(
    make_dispatcher, registry_handler, operation, label
):
    dispatcher, _ = make_dispatcher(registry_handler)

    result = await dispatcher.invoke(operation, {"package_name": "does-not-exist-zz"})

    assert result.is_error
    assert result.content == ()
    assert result.error.kind is ErrorKind.PACKAGE_NOT_FOUND
    assert result.error.message.startswith(f"Failed to fetch {label} package info:")


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["get_npm_docs", "get_pypi_docs"])
@pytest.mark.parametrize(
    "exc_type, message",
    [
        (httpx.ConnectTimeout, "timed out"),
        (httpx.ConnectError, "[Errno 111] Connection refused"),
    ],
)
async def test_network_failure_yields_internal_error(
    make_dispatcher, failing_handler, operation, exc_type, message
):
    dispatcher, transport = make_dispatcher(failing_handler(exc_type, message))

    result = await dispatcher.invoke(operation, {"package_name": "anything"})

    assert result.is_error
    assert result.error.kind is ErrorKind.INTERNAL_ERROR
    assert message in result.error.message
    # single attempt, no fallback to the other registry
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_malformed_upstream_body(make_dispatcher):
    dispatcher, _ = make_dispatcher(
        lambda request: httpx.Response(200, json={"name": "x", "versions": {}})
    )

    result = await dispatcher.invoke("get_npm_docs", {"package_name": "x"})

    assert result.is_error
    assert result.error.kind is ErrorKind.MALFORMED_RESPONSE
    assert "dist-tags" in result.error.message


@pytest.mark.asyncio
async def test_render_fault_becomes_typed_error():
    """A fault while rendering is reported, not propagated."""
    npm = StubClient(result=object())
    dispatcher = Dispatcher(npm_client=npm, pypi_client=StubClient())

    result = await dispatcher.invoke("get_npm_docs", {"package_name": "left-pad"})

    assert result.is_error
    assert result.error.kind is ErrorKind.INTERNAL_ERROR
    assert result.error.message.startswith("Unexpected error in get_npm_docs:")
    assert npm.calls == ["left-pad"]


@pytest.mark.asyncio
async def test_cancellation_propagates():
    """Cancelling the invocation aborts it instead of producing a result."""
    dispatcher = Dispatcher(
        npm_client=StubClient(exc=asyncio.CancelledError()), pypi_client=StubClient()
    )

    with pytest.raises(asyncio.CancelledError):
        await dispatcher.invoke("get_npm_docs", {"package_name": "left-pad"})


@pytest.mark.asyncio
async def test_cancelling_inflight_fetch():
    """A task cancelled mid-fetch stops waiting on the upstream."""
    started = asyncio.Event()

    class HangingClient(StubClient):
        async def fetch(self, package_name):
            started.set()
            await asyncio.sleep(3600)

    dispatcher = Dispatcher(npm_client=HangingClient(), pypi_client=StubClient())
    task = asyncio.create_task(dispatcher.invoke("get_npm_docs", {"package_name": "x"}))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


# ============================================================================
# ENVELOPE
# ============================================================================


def test_success_envelope():
    assert ToolResult.success("# doc").to_dict() == {
        "content": [{"type": "text", "text": "# doc"}]
    }


def test_error_envelope():
    result = ToolResult.failure(ErrorKind.METHOD_NOT_FOUND, "Unknown tool: x")
    assert result.to_dict() == {
        "isError": True,
        "error": {"kind": "method_not_found", "code": -32601, "message": "Unknown tool: x"},
    }
