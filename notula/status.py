"""Document statistics shown in the status bar."""

from __future__ import annotations

from typing import NamedTuple

from .models import DocumentLine, ImageElement


class DocumentStats(NamedTuple):
    """Line count and character count; each image counts as one character."""

    lines: int
    characters: int


def document_stats(lines: list[DocumentLine]) -> DocumentStats:
    """Count lines and characters, treating every image as a single character."""
    text_chars = sum(len(line.text_content()) for line in lines)
    images = sum(
        isinstance(element, ImageElement) for line in lines for element in line.elements
    )
    return DocumentStats(len(lines), text_chars + images)


def status_text(lines: list[DocumentLine]) -> str:
    """The status bar line for a document."""
    stats = document_stats(lines)
    return f"Lines: {stats.lines} | Characters: {stats.characters}"