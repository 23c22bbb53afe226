"""
Registry clients and record models.

Components:
- npm_client: npm registry client
- pypi_client: PyPI JSON API client
- models: validated record shapes for both registries
"""

from .base import RegistryClient
from .models import NpmPackageRecord, NpmVersionInfo, PypiInfo, PypiPackageRecord
from .npm_client import NPMClient
from .pypi_client import PyPIClient

__all__ = [
    "NPMClient",
    "NpmPackageRecord",
    "NpmVersionInfo",
    "PyPIClient",
    "PypiInfo",
    "PypiPackageRecord",
    "RegistryClient",
]
