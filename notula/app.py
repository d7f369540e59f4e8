"""Application state: the open document, its file and its images."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .editor import EditorCore
from .fileio import load_from_path, save_to_path
from .images import (
    InsertedImage,
    create_sample_image,
    get_image_from_clipboard,
    process_image_bytes,
)
from .models import DocumentLine, DocumentMetadata

logger = logging.getLogger(__name__)


class NotepadApp:
    """A document being edited, with its cursor, file path and images."""

    def __init__(self) -> None:
        self.lines: list[DocumentLine] = [DocumentLine()]
        self.file_path: Path | None = None
        self.is_modified = False
        self.image_cache: dict[str, Any] = {}
        self.image_data: dict[str, bytes] = {}
        self.metadata = DocumentMetadata()
        self.editor = EditorCore()

    def window_title(self) -> str:
        """The title shown for the window, with ``*`` when there are unsaved changes."""
        filename = self.file_path.name if self.file_path is not None else ""
        marker = "*" if self.is_modified else ""
        return f"{marker}{filename or 'Untitled'} - Notepad"

    def new_file(self) -> None:
        """Discard the document and start an empty one."""
        self.lines = [DocumentLine()]
        self.file_path = None
        self.is_modified = False
        self.image_cache.clear()
        self.image_data.clear()
        self.metadata = DocumentMetadata()
        self.editor.reset()

    def insert_image_from_bytes(self, image_bytes: bytes) -> InsertedImage:
        """Insert an encoded image below the cursor line and move the cursor past it.

        Raises ValueError when the bytes are not an image.
        """
        inserted = process_image_bytes(
            image_bytes,
            self.lines,
            self.editor.cursor_line,
            self.image_data,
            self.metadata.images,
        )
        self.editor.cursor_line = inserted.cursor_line
        self.editor.cursor_col = 0
        self.is_modified = True
        return inserted

    def insert_sample_image(self) -> bool:
        """Insert the built-in gradient image; returns whether it went in."""
        try:
            self.insert_image_from_bytes(create_sample_image())
        except (ValueError, IndexError, OSError) as exc:
            logger.debug("Sample image not inserted: %s", exc)
            return False
        return True

    def paste_image_from_clipboard(self) -> InsertedImage:
        """Insert the clipboard's image; raises ClipboardImageError when there is none."""
        inserted = self.insert_image_from_bytes(get_image_from_clipboard())
        logger.info("Successfully inserted image. Total lines: %d", len(self.lines))
        return inserted

    def save_file(self) -> bool:
        """Save to the current path, if there is one; returns whether it saved."""
        if self.file_path is None:
            return False
        save_to_path(self.file_path, self.lines, self.metadata)
        self.is_modified = False
        return True

    def save_file_as(self, path: str | Path) -> None:
        """Save to ``path`` and make it the current file."""
        path = Path(path)
        save_to_path(path, self.lines, self.metadata)
        self.file_path = path
        self.is_modified = False

    def open_file(self, path: str | Path) -> None:
        """Replace the document with the one stored at ``path``."""
        path = Path(path)
        lines, metadata, image_data = load_from_path(path)
        self.image_cache.clear()
        self.lines = lines
        self.metadata = metadata
        self.image_data = image_data
        self.file_path = path
        self.is_modified = False
        self.editor.reset()