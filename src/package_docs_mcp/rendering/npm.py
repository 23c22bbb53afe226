"""Markdown rendering for npm packuments."""

from ..packages.models import NpmPackageRecord
from .sections import (
    DocumentSection,
    documentation_section,
    installation_section,
    render_document,
    title_section,
)


def npm_sections(record: NpmPackageRecord) -> list[DocumentSection]:
    """
    Build the ordered sections for an npm package.

    Order: title, description, Installation, Homepage, Repository,
    Keywords, Documentation. Only Installation and the title are
    unconditional; the rest appear when their field is present.
    """
    latest = record.latest
    sections = [title_section(record.name, record.latest_version)]

    if record.description:
        sections.append(DocumentSection(body=record.description))

    sections.append(installation_section(f"npm install {record.requested_name}"))

    if latest.homepage:
        sections.append(DocumentSection(title="Homepage", body=latest.homepage))

    if latest.repository_url:
        sections.append(
            DocumentSection(
                title="Repository",
                body=latest.repository_url.replace("git+", "", 1),
            )
        )

    if latest.keywords:
        sections.append(DocumentSection(title="Keywords", body=", ".join(latest.keywords)))

    if record.readme:
        sections.append(documentation_section(record.readme))

    return sections


def render_npm_document(record: NpmPackageRecord) -> str:
    return render_document(npm_sections(record))
