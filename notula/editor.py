"""Cursor movement and text editing over a list of document lines."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from .models import DocumentLine, TextElement

LINE_HEIGHT = 14.0


def _leading_text(line: DocumentLine) -> TextElement | None:
    if line.elements and isinstance(line.elements[0], TextElement):
        return line.elements[0]
    return None


def _is_control(c: str) -> bool:
    return unicodedata.category(c) == "Cc"


@dataclass
class EditorCore:
    """Editing state: cursor position and vertical scroll offset."""

    cursor_line: int = 0
    cursor_col: int = 0
    scroll_offset: float = 0.0

    def insert_char(self, c: str, lines: list[DocumentLine]) -> bool:
        """Insert one character at the cursor. Returns True (document modified)."""
        if self.cursor_line >= len(lines):
            lines.append(DocumentLine())
        line = lines[self.cursor_line]
        text_element = _leading_text(line)
        if text_element is not None:
            text = text_element.text
            if self.cursor_col > len(text):
                raise IndexError(
                    f"cursor column {self.cursor_col} beyond line length {len(text)}"
                )
            text_element.text = text[: self.cursor_col] + c + text[self.cursor_col :]
            self.cursor_col += 1
        else:
            line.elements.insert(0, TextElement(c))
            self.cursor_col = 1
        return True

    def insert_text(self, text: str, lines: list[DocumentLine]) -> bool:
        """Insert every non-control character of ``text``; report any change."""
        modified = False
        for c in text:
            if _is_control(c):
                continue
            if self.insert_char(c, lines):
                modified = True
        return modified

    def handle_enter(self, lines: list[DocumentLine]) -> bool:
        """Split the current line at the cursor, moving to the new line."""
        if self.cursor_line >= len(lines):
            lines.append(DocumentLine())
        text_element = _leading_text(lines[self.cursor_line])
        if text_element is not None:
            text = text_element.text
            if self.cursor_col > len(text):
                raise IndexError(
                    f"cursor column {self.cursor_col} beyond line length {len(text)}"
                )
            text_element.text = text[: self.cursor_col]
            new_line = DocumentLine([TextElement(text[self.cursor_col :])])
        else:
            new_line = DocumentLine()
        self.cursor_line += 1
        lines.insert(self.cursor_line, new_line)
        self.cursor_col = 0
        return True

    def handle_backspace(self, lines: list[DocumentLine]) -> bool:
        """Delete before the cursor or merge with the previous line."""
        if self.cursor_col > 0:
            text_element = _leading_text(lines[self.cursor_line])
            if text_element is not None and self.cursor_col <= len(text_element.text):
                text = text_element.text
                text_element.text = text[: self.cursor_col - 1] + text[self.cursor_col :]
                self.cursor_col -= 1
                return True
        elif self.cursor_line > 0:
            current = lines.pop(self.cursor_line)
            self.cursor_line -= 1
            previous = _leading_text(lines[self.cursor_line])
            if previous is not None:
                self.cursor_col = len(previous.text)
                current_text = _leading_text(current)
                if current_text is not None:
                    previous.text += current_text.text
            return True
        return False

    def move_cursor_left(self, lines: list[DocumentLine]) -> None:
        if self.cursor_col > 0:
            self.cursor_col -= 1
        elif self.cursor_line > 0:
            self.cursor_line -= 1
            self.cursor_col = len(lines[self.cursor_line].text_content())

    def move_cursor_right(self, lines: list[DocumentLine]) -> None:
        if self.cursor_line < len(lines):
            line_len = len(lines[self.cursor_line].text_content())
        else:
            line_len = 0
        if self.cursor_col < line_len:
            self.cursor_col += 1
        elif self.cursor_line < len(lines) - 1:
            self.cursor_line += 1
            self.cursor_col = 0

    def move_cursor_up(self, lines: list[DocumentLine]) -> None:
        if self.cursor_line > 0:
            self.cursor_line -= 1
            line_len = len(lines[self.cursor_line].text_content())
            self.cursor_col = min(self.cursor_col, line_len)

    def move_cursor_down(self, lines: list[DocumentLine]) -> None:
        if self.cursor_line < len(lines) - 1:
            self.cursor_line += 1
            line_len = len(lines[self.cursor_line].text_content())
            self.cursor_col = min(self.cursor_col, line_len)

    def handle_key(self, key: str, lines: list[DocumentLine]) -> bool:
        """Apply a named key press; returns True when the document changed.

        Known keys: Enter, Backspace, ArrowLeft, ArrowRight, ArrowUp, ArrowDown.
        Any other key is ignored.
        """
        if key == "Enter":
            return self.handle_enter(lines)
        if key == "Backspace":
            return self.handle_backspace(lines)
        movers = {
            "ArrowLeft": self.move_cursor_left,
            "ArrowRight": self.move_cursor_right,
            "ArrowUp": self.move_cursor_up,
            "ArrowDown": self.move_cursor_down,
        }
        mover = movers.get(key)
        if mover is not None:
            mover(lines)
        return False

    def update_scroll(self, available_height: float) -> float:
        """Keep the cursor line in view; returns the new scroll offset."""
        cursor_y = self.cursor_line * LINE_HEIGHT
        if cursor_y < self.scroll_offset:
            self.scroll_offset = cursor_y
        elif cursor_y > self.scroll_offset + available_height - LINE_HEIGHT:
            self.scroll_offset = cursor_y - available_height + LINE_HEIGHT * 2.0
        return self.scroll_offset

    def reset(self) -> None:
        self.cursor_line = 0
        self.cursor_col = 0
        self.scroll_offset = 0.0