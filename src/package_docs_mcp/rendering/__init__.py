"""Rendering of registry records into Markdown documents."""
from .npm import npm_sections, render_npm_document
from .pypi import pypi_sections, render_pypi_document
from .sections import DocumentSection, render_document

__all__ = [
    "DocumentSection",
    "npm_sections",
    "pypi_sections",
    "render_document",
    "render_npm_document",
    "render_pypi_document",
]
