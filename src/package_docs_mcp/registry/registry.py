"""Capability registry implementation."""

from pathlib import Path
from typing import Any

import yaml

from ..config import Config
from .models import CapabilityRecord


class CapabilityRegistry:
    """
    Static capability registry loaded from YAML.

    Holds the fixed, ordered list of operations callers may invoke.
    Pure data: no side effects after loading.
    """

    def __init__(self):
        """Initialize empty capability registry."""
        self._capabilities: dict[str, CapabilityRecord] = {}

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "CapabilityRegistry":
        """
        Load registry from YAML file.

        Args:
            yaml_path: Path to tools.yaml configuration file

        Returns:
            Initialized CapabilityRegistry instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is malformed
            ValueError: If structure or a capability is invalid
        """
        yaml_file = Path(yaml_path)
        if not yaml_file.exists():
            raise FileNotFoundError(f"Registry YAML not found: {yaml_path}")

        with open(yaml_file) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

        if not isinstance(data.get("capabilities"), list):
            raise ValueError("'capabilities' must be a list")

        registry = cls()
        for index, capability_data in enumerate(data["capabilities"]):
            if not isinstance(capability_data, dict):
                raise ValueError(f"Capability #{index} must be a mapping")
            try:
                capability = CapabilityRecord(**capability_data)
            except TypeError as e:
                name = capability_data.get("name", f"#{index}")
                raise ValueError(f"Invalid capability {name}: {e}") from e
            registry.add(capability)
        return registry

    def add(self, capability: CapabilityRecord) -> None:
        """
        Add capability to registry.

        Raises:
            ValueError: If capability fails validation or its name is taken
        """
        capability.validate_invariants()
        if capability.name in self._capabilities:
            raise ValueError(f"Duplicate capability name: {capability.name}")
        self._capabilities[capability.name] = capability

    def is_registered(self, name: str) -> bool:
        return name in self._capabilities

    def get(self, name: str) -> CapabilityRecord | None:
        return self._capabilities.get(name)

    def get_all(self) -> list[CapabilityRecord]:
        """All capability records in registration order."""
        return list(self._capabilities.values())

    def list_capabilities(self) -> list[dict[str, Any]]:
        """
        Listing returned to callers.

        Returns:
            Ordered list of {name, description, inputSchema} dicts
        """
        return [capability.to_listing() for capability in self._capabilities.values()]


capability_registry = CapabilityRegistry.from_yaml(Config.TOOLS_YAML_PATH)
