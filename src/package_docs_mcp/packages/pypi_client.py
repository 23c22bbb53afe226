"""
PyPI Client

Fetches project metadata from the PyPI JSON API.
"""

from typing import Any

from .base import RegistryClient
from .models import PYPI, PypiPackageRecord


class PyPIClient(RegistryClient):
    """Client for PyPI lookups: GET {base_url}/{package_name}/json."""

    registry_name = PYPI

    def __init__(self, base_url: str = "https://pypi.org/pypi", **kwargs):
        super().__init__(base_url, **kwargs)

    def package_url(self, package_name: str) -> str:
        return f"{self.base_url}/{package_name}/json"

    def parse(self, data: Any, package_name: str) -> PypiPackageRecord:
        return PypiPackageRecord.from_payload(data, package_name)
