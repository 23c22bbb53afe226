"""Markdown rendering for PyPI project metadata."""

from ..packages.models import PypiPackageRecord
from .sections import (
    DocumentSection,
    documentation_section,
    installation_section,
    render_document,
    title_section,
)


def pypi_sections(record: PypiPackageRecord) -> list[DocumentSection]:
    """
    Build the ordered sections for a PyPI project.

    Order: title, summary, Installation, Homepage, Project Links,
    Keywords, Documentation. Keywords are shown as the raw upstream
    string, not split.
    """
    info = record.info
    sections = [title_section(info.name, info.version)]

    if info.summary:
        sections.append(DocumentSection(body=info.summary))

    sections.append(installation_section(f"pip install {record.requested_name}"))

    if info.home_page:
        sections.append(DocumentSection(title="Homepage", body=info.home_page))

    if info.project_urls:
        links = "\n".join(f"- {label}: {url}" for label, url in info.project_urls.items())
        sections.append(DocumentSection(title="Project Links", body=links))

    if info.keywords:
        sections.append(DocumentSection(title="Keywords", body=info.keywords))

    if info.description:
        sections.append(documentation_section(info.description))

    return sections


def render_pypi_document(record: PypiPackageRecord) -> str:
    return render_document(pypi_sections(record))
