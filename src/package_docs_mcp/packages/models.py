"""
Registry record models.

Explicit, validated shapes for the two upstream metadata documents. Parsing
happens once, when the client receives the body; required fields that are
missing raise MalformedResponseError, optional fields of the wrong type are
dropped.

Invariants:
- records are immutable after parsing
- `requested_name` is the identifier exactly as the caller sent it
- PyPI `project_urls` preserves upstream insertion order
"""

from dataclasses import dataclass, field
from typing import Any

from ..errors import MalformedResponseError

NPM = "npm"
PYPI = "PyPI"


def _optional_str(value: Any) -> str | None:
    """Return value if it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None


def _require_str(registry: str, package_name: str, value: Any, path: str) -> str:
    if not isinstance(value, str) or not value:
        raise MalformedResponseError(registry, package_name, f"missing '{path}'")
    return value


def _require_mapping(registry: str, package_name: str, value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise MalformedResponseError(registry, package_name, f"missing '{path}' object")
    return value


@dataclass(frozen=True)
class NpmVersionInfo:
    """Distribution metadata of one published npm version."""

    homepage: str | None = None
    repository_url: str | None = None
    keywords: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "NpmVersionInfo":
        repository = data.get("repository")
        if isinstance(repository, dict):
            repository_url = _optional_str(repository.get("url"))
        else:
            # Older packages publish the repository as a bare string.
            repository_url = _optional_str(repository)

        keywords = data.get("keywords")
        if isinstance(keywords, str):
            keywords = [keywords] if keywords else []
        elif not isinstance(keywords, list):
            keywords = []

        return cls(
            homepage=_optional_str(data.get("homepage")),
            repository_url=repository_url,
            keywords=tuple(k for k in keywords if isinstance(k, str) and k),
        )


@dataclass(frozen=True)
class NpmPackageRecord:
    """Packument returned by `GET {registry}/{name}`, reduced to what we render."""

    requested_name: str
    name: str
    latest_version: str
    latest: NpmVersionInfo
    description: str | None = None
    readme: str | None = None

    @classmethod
    def from_payload(cls, data: Any, package_name: str) -> "NpmPackageRecord":
        """
        Validate and parse an npm packument.

        Args:
            data: Decoded JSON body
            package_name: Identifier the caller asked for

        Returns:
            Parsed NpmPackageRecord

        Raises:
            MalformedResponseError: If name, dist-tags.latest or
                versions[latest] is absent
        """
        data = _require_mapping(NPM, package_name, data, "packument")
        dist_tags = _require_mapping(NPM, package_name, data.get("dist-tags"), "dist-tags")
        latest_version = _require_str(
            NPM, package_name, dist_tags.get("latest"), "dist-tags.latest"
        )
        versions = _require_mapping(NPM, package_name, data.get("versions"), "versions")
        version_data = _require_mapping(
            NPM, package_name, versions.get(latest_version), f"versions[{latest_version}]"
        )

        return cls(
            requested_name=package_name,
            name=_require_str(NPM, package_name, data.get("name"), "name"),
            latest_version=latest_version,
            latest=NpmVersionInfo.from_payload(version_data),
            description=_optional_str(data.get("description")),
            readme=_optional_str(data.get("readme")),
        )


@dataclass(frozen=True)
class PypiInfo:
    """The `info` object of the PyPI JSON API."""

    name: str
    version: str
    summary: str | None = None
    home_page: str | None = None
    project_urls: dict[str, str] = field(default_factory=dict)
    keywords: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class PypiPackageRecord:
    """Document returned by `GET {registry}/{name}/json`."""

    requested_name: str
    info: PypiInfo

    @classmethod
    def from_payload(cls, data: Any, package_name: str) -> "PypiPackageRecord":
        """
        Validate and parse a PyPI project document.

        Raises:
            MalformedResponseError: If info, info.name or info.version is absent
        """
        data = _require_mapping(PYPI, package_name, data, "project")
        info = _require_mapping(PYPI, package_name, data.get("info"), "info")

        project_urls = info.get("project_urls")
        if isinstance(project_urls, dict):
            project_urls = {
                label: url
                for label, url in project_urls.items()
                if isinstance(label, str) and isinstance(url, str)
            }
        else:
            project_urls = {}

        return cls(
            requested_name=package_name,
            info=PypiInfo(
                name=_require_str(PYPI, package_name, info.get("name"), "info.name"),
                version=_require_str(PYPI, package_name, info.get("version"), "info.version"),
                summary=_optional_str(info.get("summary")),
                home_page=_optional_str(info.get("home_page")),
                project_urls=project_urls,
                keywords=_optional_str(info.get("keywords")),
                description=_optional_str(info.get("description")),
            ),
        )
