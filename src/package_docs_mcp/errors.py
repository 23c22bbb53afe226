"""Error taxonomy for tool invocations."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure a tool invocation can report back to the caller."""

    METHOD_NOT_FOUND = "method_not_found"
    INVALID_PARAMS = "invalid_params"
    PACKAGE_NOT_FOUND = "package_not_found"
    MALFORMED_RESPONSE = "malformed_response"
    INTERNAL_ERROR = "internal_error"

    @property
    def code(self) -> int:
        """JSON-RPC error code for this kind."""
        return _JSONRPC_CODES[self]


_JSONRPC_CODES = {
    ErrorKind.METHOD_NOT_FOUND: -32601,
    ErrorKind.INVALID_PARAMS: -32602,
    ErrorKind.PACKAGE_NOT_FOUND: -32603,
    ErrorKind.MALFORMED_RESPONSE: -32603,
    ErrorKind.INTERNAL_ERROR: -32603,
}


class PackageDocsError(Exception):
    """Base class for every failure the dispatcher turns into a ToolResult error."""

    kind = ErrorKind.INTERNAL_ERROR


class UnknownCapabilityError(PackageDocsError):
    kind = ErrorKind.METHOD_NOT_FOUND

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(PackageDocsError):
    kind = ErrorKind.INVALID_PARAMS


class RegistryFetchError(PackageDocsError):
    """
    Upstream lookup failed (transport error or non-2xx status).

    Args:
        registry: Display name of the registry ("npm", "PyPI")
        detail: Upstream error text
        status_code: HTTP status if the registry answered
    """

    def __init__(self, registry: str, detail: str, status_code: int | None = None):
        self.registry = registry
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"Failed to fetch {registry} package info: {detail}")


class PackageNotFoundError(RegistryFetchError):
    kind = ErrorKind.PACKAGE_NOT_FOUND


class MalformedResponseError(PackageDocsError):
    """Upstream answered 2xx but the body is missing fields we render from."""

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, registry: str, package_name: str, detail: str):
        self.registry = registry
        self.package_name = package_name
        self.detail = detail
        super().__init__(
            f"Malformed {registry} response for '{package_name}': {detail}"
        )
