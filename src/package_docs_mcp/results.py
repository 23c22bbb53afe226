"""Tool result envelope returned by the dispatcher."""

from dataclasses import dataclass
from typing import Any

from .errors import ErrorKind


@dataclass(frozen=True)
class TextContent:
    """A single text content block."""

    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolErrorInfo:
    """Structured error carried by a failed ToolResult."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of one tool invocation.

    Exactly one of `content` or `error` is meaningful:
    - success: content holds the rendered document as text blocks
    - failure: error holds kind + human-readable message, content is empty
    """

    content: tuple[TextContent, ...] = ()
    error: ToolErrorInfo | None = None

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text=text),))

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ToolResult":
        return cls(error=ToolErrorInfo(kind=kind, message=message))

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        """Wire envelope: {content: [...]} on success, {isError, error} on failure."""
        if self.error is not None:
            return {
                "isError": True,
                "error": {
                    "kind": self.error.kind.value,
                    "code": self.error.kind.code,
                    "message": self.error.message,
                },
            }
        return {
            "content": [{"type": block.type, "text": block.text} for block in self.content]
        }
