"""
NPM Client

Fetches a package document (packument) from the npm registry.
"""

from typing import Any

from .base import RegistryClient
from .models import NPM, NpmPackageRecord


class NPMClient(RegistryClient):
    """Client for npm registry lookups: GET {base_url}/{package_name}."""

    registry_name = NPM

    def __init__(self, base_url: str = "https://registry.npmjs.org", **kwargs):
        super().__init__(base_url, **kwargs)

    def package_url(self, package_name: str) -> str:
        return f"{self.base_url}/{package_name}"

    def parse(self, data: Any, package_name: str) -> NpmPackageRecord:
        return NpmPackageRecord.from_payload(data, package_name)
