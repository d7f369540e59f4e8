# notula

A small notepad that keeps pictures inside your notes. Text stays plain text
on disk. Every image sits on a line of its own, and the pictures themselves
are stored next to the note in a JSON side file.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

The editor window uses Tkinter, which is part of the standard library but is
packaged separately on some systems. It also needs Pillow's Tk support
(`PIL.ImageTk`).

## Running the editor

```
notula
notula notes.txt
```

This opens an 800×600 window titled `Untitled - Notepad`. If you give a file,
it is loaded first. If the file cannot be read, the command exits with an
error message. The title shows the file name, with a leading `*` while there
are unsaved changes.

- **File**: New, Open…, Save, Save As…, Exit
- **Edit**: Paste Image (also `Ctrl+V`), Insert Sample Image

Editing keys:

- Typing inserts text at the cursor.
- `Enter` splits the line at the cursor.
- `Backspace` deletes the character before the cursor, or joins the line
  with the one above.
- The arrow keys move the cursor.
- Clicking an image puts the cursor at the start of that image's line.

A column of line numbers runs down the left side, and the number of the
cursor's line is highlighted. The status bar reads
`Lines: N | Characters: M`, and each image counts as one character.

**Save** writes to the current file and does nothing when the note has never
been saved; use **Save As…** for that. Open and Save As use file dialogs that
offer `*.txt` and `*.md`. Errors while opening, saving or pasting are logged
and the window stays open.

Pasting reads the image on the clipboard through Pillow's `ImageGrab` and
stores it as PNG. The image goes on a new line after the cursor, followed by
an empty line to keep typing on, and the cursor moves to that empty line.
"Insert Sample Image" adds a 200×100 colour gradient, which is handy for
trying things out.

## File format

A note saved as `notes.txt` (or `notes.md`) is ordinary UTF-8 text. An image
line is written as a placeholder:

```
Shopping list
[img_load("3f1c…")]
Remember the receipt
```

When a note holds images, a side file `notes.txt.meta` (or `notes.md.meta`)
is written beside it. It is JSON with one entry per image under `"images"`.
Each entry holds the image's `id`, its `width` and `height` in pixels, and the
image bytes in base64 under `data`.

Opening the note reads the side file back. A placeholder whose id is not in
the side file stays an ordinary line of text. Stored image data that is not
valid base64, or a malformed side file, raises `ValueError`.

For any extension other than `.txt` and `.md`, the side file is written as
`<name>.txt.meta`. Loading, however, looks for `<name>.<ext>.meta`, so keep
notes with images in `.txt` or `.md` files.

## Using it from Python

```python
from pathlib import Path

from notula.app import NotepadApp
from notula.fileio import content_to_text, load_from_path

app = NotepadApp()
app.editor.insert_text("Hello", app.lines)
app.insert_sample_image()
app.save_file_as(Path("hello.txt"))

print(app.window_title())        # hello.txt - Notepad
print(content_to_text(app.lines))

lines, metadata, image_data = load_from_path(Path("hello.txt"))
```

`NotepadApp` holds the document. It has these methods:

- `new_file`
- `open_file`
- `save_file`
- `save_file_as`
- `insert_image_from_bytes`
- `insert_sample_image`
- `paste_image_from_clipboard`
- `window_title`

Its editing state is in `app.editor` (`EditorCore`). Pasting when the
clipboard has no image raises `notula.images.ClipboardImageError`.

The building blocks are also available on their own:

- `notula.models`: `DocumentLine`, `TextElement`, `ImageElement`,
  `ImageMetadata` and `DocumentMetadata`, each metadata class with
  `to_dict` / `from_dict`
- `notula.editor`: `EditorCore`, which holds the cursor and scroll offset.
  Its methods are `insert_char`, `insert_text`, `handle_enter`,
  `handle_backspace`, the `move_cursor_*` methods, `handle_key`,
  `update_scroll` and `reset`.
- `notula.fileio`: `content_to_text`, `text_to_content`, `save_to_path`,
  `load_from_path`
- `notula.images`: `create_sample_image`, `get_image_from_clipboard`,
  `process_image_bytes`, which returns an `InsertedImage`
- `notula.status`: `document_stats` and `status_text`
- `notula.gui`: `NotepadWindow`, `MenuAction`, `main`, and the layout helpers
  `scaled_image_size`, `cursor_segments` and `line_number_label`

## What it does not do

notula is a minimal editor. It has:

- no undo
- no text selection
- no cut, copy or paste of text
- no find
- no word wrap
- no font choice

Typed text always goes into the first text run of the current line. Exit
closes the window without asking about unsaved changes.