"""Desktop window for the editor: menus, line numbers, text, images and status."""

from __future__ import annotations

import argparse
import io
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from .app import NotepadApp
from .editor import LINE_HEIGHT
from .images import ClipboardImageError
from .models import ImageElement, TextElement
from .status import status_text

logger = logging.getLogger(__name__)

GUTTER_WIDTH = 50
CONTENT_MARGIN = 10
CURSOR_LINE_COLOR = "#0064c8"
LINE_NUMBER_COLOR = "#787878"
TEXT_COLOR = "#000000"
_FILE_TYPES = [("Text files", "*.txt *.md"), ("All files", "*")]
_KEY_NAMES = {
    "Return": "Enter",
    "KP_Enter": "Enter",
    "BackSpace": "Backspace",
    "Left": "ArrowLeft",
    "Right": "ArrowRight",
    "Up": "ArrowUp",
    "Down": "ArrowDown",
}
_CONTROL_MASK = 0x4


class MenuAction(Enum):
    """Commands the menus can issue."""

    NEW_FILE = "new_file"
    OPEN_FILE = "open_file"
    SAVE_FILE = "save_file"
    SAVE_AS = "save_as"
    EXIT = "exit"
    PASTE_IMAGE = "paste_image"
    INSERT_SAMPLE_IMAGE = "insert_sample_image"


def scaled_image_size(width: int, height: int, max_width: float) -> tuple[float, float]:
    """Shrink an image to ``max_width`` keeping its aspect ratio; never enlarge."""
    scale = max_width / width if width > max_width else 1.0
    return width * scale, height * scale


def cursor_segments(text: str, cursor_col: int, sole_element: bool) -> tuple[str, str, str]:
    """Split a line's text around the cursor into before, ``|`` + char, and after."""
    display = " " if not text and sole_element else text
    before = display[:cursor_col]
    cursor_char = display[cursor_col] if cursor_col < len(display) else " "
    after = display[cursor_col + 1 :]
    return before, f"|{cursor_char}", after


def line_number_label(line_number: int) -> str:
    """A line number right-aligned in four columns."""
    return f"{line_number:4}"


class NotepadWindow:
    """The editor window bound to a Tk root."""

    def __init__(self, root: Any, app: NotepadApp | None = None) -> None:
        import tkinter as tk
        import tkinter.font as tkfont

        self.root = root
        self.app = app if app is not None else NotepadApp()
        self._photos: list[Any] = []
        self._build_menu(tk)
        self.status = tk.Label(root, anchor="w")
        self.status.pack(side=tk.BOTTOM, fill=tk.X)
        self.canvas = tk.Canvas(root, background="white", highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.font = tkfont.nametofont("TkFixedFont")
        self._row_height = max(LINE_HEIGHT, float(self.font.metrics("linespace")))
        root.bind("<Control-v>", self._on_paste)
        root.bind("<Control-V>", self._on_paste)
        root.bind("<Key>", self._on_key)
        self.canvas.bind("<Configure>", lambda _event: self.render())

    def _build_menu(self, tk: Any) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        self._add_items(
            file_menu,
            [
                ("New", MenuAction.NEW_FILE),
                ("Open...", MenuAction.OPEN_FILE),
                None,
                ("Save", MenuAction.SAVE_FILE),
                ("Save As...", MenuAction.SAVE_AS),
                None,
                ("Exit", MenuAction.EXIT),
            ],
        )
        menubar.add_cascade(label="File", menu=file_menu)
        edit_menu = tk.Menu(menubar, tearoff=False)
        self._add_items(
            edit_menu,
            [
                ("Paste Image (Ctrl+V)", MenuAction.PASTE_IMAGE),
                ("Insert Sample Image", MenuAction.INSERT_SAMPLE_IMAGE),
            ],
        )
        menubar.add_cascade(label="Edit", menu=edit_menu)
        self.root.config(menu=menubar)

    def _add_items(self, menu: Any, items: list[tuple[str, MenuAction] | None]) -> None:
        for item in items:
            if item is None:
                menu.add_separator()
                continue
            label, action = item
            menu.add_command(label=label, command=lambda a=action: self.perform(a))

    def perform(self, action: MenuAction) -> None:
        """Carry out a menu command and redraw."""
        if action is MenuAction.EXIT:
            self.root.destroy()
            return
        if action is MenuAction.NEW_FILE:
            self.app.new_file()
        elif action is MenuAction.OPEN_FILE:
            self._open_dialog()
        elif action is MenuAction.SAVE_FILE:
            try:
                self.app.save_file()
            except OSError as exc:
                logger.error("Error saving file: %s", exc)
        elif action is MenuAction.SAVE_AS:
            self._save_as_dialog()
        elif action is MenuAction.PASTE_IMAGE:
            self._paste_image()
        elif action is MenuAction.INSERT_SAMPLE_IMAGE:
            self.app.insert_sample_image()
        self.render()

    def _open_dialog(self) -> None:
        from tkinter import filedialog

        chosen = filedialog.askopenfilename(parent=self.root, filetypes=_FILE_TYPES)
        if not chosen:
            return
        try:
            self.app.open_file(Path(chosen))
        except (OSError, ValueError) as exc:
            logger.error("Error opening file: %s", exc)

    def _save_as_dialog(self) -> None:
        from tkinter import filedialog

        chosen = filedialog.asksaveasfilename(
            parent=self.root, filetypes=_FILE_TYPES, defaultextension=".txt"
        )
        if not chosen:
            return
        try:
            self.app.save_file_as(Path(chosen))
        except OSError as exc:
            logger.error("Error saving file: %s", exc)

    def _paste_image(self) -> None:
        try:
            self.app.paste_image_from_clipboard()
        except (ClipboardImageError, ValueError, IndexError) as exc:
            logger.error("Error pasting image: %s", exc)

    def _on_paste(self, _event: Any) -> str:
        self._paste_image()
        self.render()
        return "break"

    def _on_key(self, event: Any) -> None:
        lines = self.app.lines
        key = _KEY_NAMES.get(event.keysym)
        if key is not None:
            modified = self.app.editor.handle_key(key, lines)
        elif event.char and not event.state & _CONTROL_MASK:
            modified = self.app.editor.insert_text(event.char, lines)
        else:
            return
        if modified:
            self.app.is_modified = True
        self.render()

    def _place_cursor(self, line_index: int) -> None:
        self.app.editor.cursor_line = line_index
        self.app.editor.cursor_col = 0
        self.render()

    def _photo(self, element: ImageElement, max_width: float) -> Any | None:
        from PIL import Image, ImageTk

        image = self.app.image_cache.get(element.id)
        if image is None:
            data = self.app.image_data.get(element.id)
            if data is None:
                return None
            try:
                with Image.open(io.BytesIO(data)) as opened:
                    image = opened.convert("RGBA")
            except OSError:
                return None
            self.app.image_cache[element.id] = image
        width, height = scaled_image_size(element.width, element.height, max_width)
        size = (max(1, round(width)), max(1, round(height)))
        photo = ImageTk.PhotoImage(image.resize(size))
        self._photos.append(photo)
        return photo

    def _draw_text(self, x: float, y: float, text: str, color: str) -> float:
        if text:
            self.canvas.create_text(x, y, text=text, anchor="nw", fill=color, font=self.font)
        return x + self.font.measure(text)

    def render(self) -> None:
        """Redraw the whole window from the application state."""
        app = self.app
        editor = app.editor
        canvas = self.canvas
        canvas.delete("all")
        self._photos.clear()
        self.root.title(app.window_title())
        self.status.config(text=status_text(app.lines))

        height = max(canvas.winfo_height(), 1)
        content_x = GUTTER_WIDTH + CONTENT_MARGIN
        max_width = max(canvas.winfo_width() - content_x - 20, 1)
        y = -editor.update_scroll(height)

        for index, line in enumerate(app.lines):
            row_height = self._row_height
            on_cursor = index == editor.cursor_line
            number_color = CURSOR_LINE_COLOR if on_cursor else LINE_NUMBER_COLOR
            self._draw_text(2, y, line_number_label(index + 1), number_color)
            x = float(content_x)
            for element in line.elements:
                if isinstance(element, TextElement):
                    if on_cursor:
                        before, cursor, after = cursor_segments(
                            element.text, editor.cursor_col, len(line.elements) == 1
                        )
                        x = self._draw_text(x, y, before, TEXT_COLOR)
                        x = self._draw_text(x, y, cursor, TEXT_COLOR)
                        x = self._draw_text(x, y, after, TEXT_COLOR)
                    else:
                        x = self._draw_text(x, y, element.text, TEXT_COLOR)
                    continue
                photo = self._photo(element, max_width)
                if photo is None:
                    x = self._draw_text(x, y, "[IMAGE LOAD ERROR]", TEXT_COLOR)
                    continue
                item = canvas.create_image(x, y, image=photo, anchor="nw")
                canvas.tag_bind(
                    item, "<Button-1>", lambda _event, i=index: self._place_cursor(i)
                )
                x += photo.width()
                row_height = max(row_height, float(photo.height()))
            y += row_height

        canvas.create_line(GUTTER_WIDTH, 0, GUTTER_WIDTH, height, fill="#c8c8c8")


def main(argv: list[str] | None = None) -> int:
    """Open the editor window, optionally loading a file first."""
    parser = argparse.ArgumentParser(prog="notula", description="Text editor with inline images.")
    parser.add_argument("file", nargs="?", help="document to open")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    app = NotepadApp()
    if args.file:
        try:
            app.open_file(Path(args.file))
        except (OSError, ValueError) as exc:
            parser.error(f"cannot open {args.file}: {exc}")

    import tkinter as tk

    root = tk.Tk()
    root.geometry("800x600")
    root.title("Untitled - Notepad")
    window = NotepadWindow(root, app)
    window.render()
    root.mainloop()
    return 0