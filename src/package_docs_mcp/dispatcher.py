"""
Tool dispatcher: validate, fetch, render, and wrap the result.

Each invocation is independent. The dispatcher holds only its injected
collaborators (clients, registry); no state survives between calls.
"""

from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

from .config import Config
from .errors import (
    ErrorKind,
    InvalidArgumentsError,
    PackageDocsError,
    UnknownCapabilityError,
)
from .packages import NPMClient, PyPIClient, RegistryClient
from .registry import CapabilityRegistry, capability_registry
from .registry.models import ARGUMENT_NAME
from .rendering import render_npm_document, render_pypi_document
from .results import ToolResult


class Dispatcher:
    """
    Maps an operation name + arguments to one fetch and one render.

    Workflow per invocation:
    1. Reject unknown operation names (method_not_found, no fetch)
    2. Validate package_name is a non-empty string (invalid_params, no fetch)
    3. Select the client/renderer pair for the capability's registry
    4. Fetch then render inside a single fallible region
    5. Wrap the document as one text block, or the failure as a typed error

    There is no fallback to the other registry and no retry.

    Args:
        npm_client: Client used for capabilities with registry "npm"
        pypi_client: Client used for capabilities with registry "pypi"
        registry: Capability registry (defaults to the packaged tools.yaml)
    """

    def __init__(
        self,
        npm_client: RegistryClient,
        pypi_client: RegistryClient,
        registry: CapabilityRegistry | None = None,
    ):
        self.registry = registry if registry is not None else capability_registry
        self._pipelines: dict[str, tuple[RegistryClient, Callable[[Any], str]]] = {
            "npm": (npm_client, render_npm_document),
            "pypi": (pypi_client, render_pypi_document),
        }

    @classmethod
    def from_config(
        cls, config: type[Config], registry: CapabilityRegistry | None = None
    ) -> "Dispatcher":
        """Build a dispatcher whose clients use the given Config values."""
        client_options = {
            "timeout": config.HTTP_TIMEOUT,
            "connect_timeout": config.HTTP_CONNECT_TIMEOUT,
            "user_agent": config.USER_AGENT,
        }
        return cls(
            npm_client=NPMClient(config.NPM_REGISTRY_URL, **client_options),
            pypi_client=PyPIClient(config.PYPI_REGISTRY_URL, **client_options),
            registry=registry,
        )

    def list_capabilities(self) -> list[dict[str, Any]]:
        return self.registry.list_capabilities()

    async def invoke(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        """
        Execute one tool invocation.

        Never raises for expected failures: every error (unknown tool, bad
        arguments, network, HTTP status, malformed upstream body, unexpected
        fault while rendering) comes back as a failed ToolResult.
        Cancellation is not caught and propagates to the caller.

        Args:
            name: Operation name
            arguments: Argument mapping; must contain package_name

        Returns:
            ToolResult with the rendered document or a typed error
        """
        try:
            package_name = self._validate(name, arguments)
            client, render = self._pipelines[self.registry.get(name).registry]

            logger.info(f"{name}: fetching {client.registry_name} package '{package_name}'")
            record = await client.fetch(package_name)
            document = render(record)
        except PackageDocsError as e:
            logger.warning(f"{name} failed ({e.kind.value}): {e}")
            return ToolResult.failure(e.kind, str(e))
        except Exception as e:
            logger.exception(f"{name} failed with unexpected error")
            return ToolResult.failure(
                ErrorKind.INTERNAL_ERROR, f"Unexpected error in {name}: {e}"
            )

        logger.info(f"{name}: rendered {len(document)} characters for '{package_name}'")
        return ToolResult.success(document)

    def _validate(self, name: str, arguments: Mapping[str, Any] | None) -> str:
        """Return package_name or raise the matching PackageDocsError."""
        if not self.registry.is_registered(name):
            raise UnknownCapabilityError(name)

        if not isinstance(arguments, Mapping):
            raise InvalidArgumentsError(f"{name}: arguments must be an object")

        package_name = arguments.get(ARGUMENT_NAME)
        if package_name is None:
            raise InvalidArgumentsError(f"{name}: missing required argument '{ARGUMENT_NAME}'")
        if not isinstance(package_name, str):
            raise InvalidArgumentsError(
                f"{name}: '{ARGUMENT_NAME}' must be a string, got {type(package_name).__name__}"
            )
        if package_name == "":
            raise InvalidArgumentsError(f"{name}: '{ARGUMENT_NAME}' must not be empty")
        return package_name
