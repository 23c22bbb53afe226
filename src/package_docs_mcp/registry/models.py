"""
Capability registry data models.

Invariants:
- name must be unique across the registry
- registry must be one of: npm, pypi
- description must not be empty
- input_schema is an object schema whose only required field is the
  string property `package_name`
"""

from dataclasses import dataclass
from typing import Any

REGISTRIES = ("npm", "pypi")
ARGUMENT_NAME = "package_name"


@dataclass(frozen=True)
class CapabilityRecord:
    """Static metadata for one invocable operation."""

    name: str  # "get_npm_docs"
    registry: str  # "npm", "pypi"
    description: str
    input_schema: dict[str, Any]

    def validate_invariants(self) -> bool:
        """
        Validate CapabilityRecord invariants.

        Returns:
            True if all invariants are satisfied

        Raises:
            ValueError: If any invariant is violated
        """
        if not self.name:
            raise ValueError("capability name must not be empty")
        if self.registry not in REGISTRIES:
            raise ValueError(
                f"{self.name}: registry must be one of {list(REGISTRIES)}, got '{self.registry}'"
            )
        if not self.description:
            raise ValueError(f"{self.name}: description must not be empty")

        schema = self.input_schema
        if not isinstance(schema, dict) or schema.get("type") != "object":
            raise ValueError(f"{self.name}: input_schema must be an object schema")
        prop = (schema.get("properties") or {}).get(ARGUMENT_NAME)
        if not isinstance(prop, dict) or prop.get("type") != "string":
            raise ValueError(f"{self.name}: input_schema must declare string '{ARGUMENT_NAME}'")
        if schema.get("required") != [ARGUMENT_NAME]:
            raise ValueError(f"{self.name}: '{ARGUMENT_NAME}' must be the only required field")
        return True

    @property
    def argument_description(self) -> str:
        """Description of the package_name argument, for tool signatures."""
        return self.input_schema["properties"][ARGUMENT_NAME].get("description", "")

    def to_listing(self) -> dict[str, Any]:
        """Entry as returned to callers listing capabilities."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }
