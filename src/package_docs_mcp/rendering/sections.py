"""Document sections and the Markdown layout they render to."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentSection:
    """
    One ordered block of a rendered document.

    A section without a title renders as a bare paragraph (used for the
    title line and the summary). `spaced` puts a blank line between the
    heading and the body.
    """

    body: str
    title: str | None = None
    spaced: bool = False
    terminator: str = "\n\n"

    def render(self) -> str:
        if self.title is None:
            return f"{self.body}{self.terminator}"
        separator = "\n\n" if self.spaced else "\n"
        return f"## {self.title}{separator}{self.body}{self.terminator}"


def title_section(name: str, version: str) -> DocumentSection:
    return DocumentSection(body=f"# {name} v{version}")


def installation_section(command: str) -> DocumentSection:
    return DocumentSection(
        title="Installation",
        body=f"```bash\n{command}\n```",
        spaced=True,
    )


def documentation_section(text: str) -> DocumentSection:
    """Verbatim upstream readme/description; always the last section."""
    return DocumentSection(title="Documentation", body=text, spaced=True, terminator="\n")


def render_document(sections: Iterable[DocumentSection]) -> str:
    return "".join(section.render() for section in sections)
