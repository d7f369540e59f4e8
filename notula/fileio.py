"""Saving and loading documents as plain text plus a JSON image sidecar."""

from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import MutableMapping

from .models import DocumentLine, DocumentMetadata, ImageElement, TextElement

_PLACEHOLDER_PREFIX = '[img_load("'
_PLACEHOLDER_SUFFIX = '")]'


def _placeholder(image_id: str) -> str:
    return f"{_PLACEHOLDER_PREFIX}{image_id}{_PLACEHOLDER_SUFFIX}"


def _placeholder_id(line_text: str) -> str | None:
    """Return the image id of a placeholder line, or None for ordinary text."""
    if (
        line_text.startswith(_PLACEHOLDER_PREFIX)
        and line_text.endswith(_PLACEHOLDER_SUFFIX)
        and len(line_text) >= len(_PLACEHOLDER_PREFIX) + len(_PLACEHOLDER_SUFFIX)
    ):
        return line_text[len(_PLACEHOLDER_PREFIX) : len(line_text) - len(_PLACEHOLDER_SUFFIX)]
    return None


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping one trailing empty line and stray carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _extension(path: Path) -> str:
    return path.suffix[1:] if path.suffix else "txt"


def _with_extension(path: Path, extension: str) -> Path:
    return path.with_suffix(f".{extension}")


def content_to_text(lines: list[DocumentLine]) -> str:
    """Render lines as text, with images written as placeholders."""

    def render(element: TextElement | ImageElement) -> str:
        if isinstance(element, TextElement):
            return element.text
        return _placeholder(element.id)

    return "\n".join("".join(render(e) for e in line.elements) for line in lines)


def text_to_content(
    text: str,
    metadata: DocumentMetadata,
    image_data: MutableMapping[str, bytes],
) -> list[DocumentLine]:
    """Parse saved text into lines, decoding referenced images into ``image_data``.

    A placeholder line whose id is absent from ``metadata`` stays ordinary text.
    Raises ValueError when an image's stored data is not valid base64.
    """
    lines: list[DocumentLine] = []
    for line_text in _split_lines(text):
        image_id = _placeholder_id(line_text)
        image_meta = metadata.images.get(image_id) if image_id is not None else None
        if image_id is not None and image_meta is not None:
            lines.append(
                DocumentLine([ImageElement(image_id, image_meta.width, image_meta.height)])
            )
            if image_id not in image_data:
                image_data[image_id] = base64.b64decode(image_meta.data, validate=True)
        else:
            lines.append(DocumentLine([TextElement(line_text)]))
    if not lines:
        lines.append(DocumentLine())
    return lines


def save_to_path(
    path: str | Path,
    lines: list[DocumentLine],
    metadata: DocumentMetadata,
) -> None:
    """Write the document text, and a ``.meta`` sidecar when it holds images.

    For ``.md`` and ``.txt`` files the sidecar is ``<name>.<ext>.meta``; any other
    extension gets ``<name>.txt.meta``.
    """
    path = Path(path)
    path.write_bytes(content_to_text(lines).encode("utf-8"))
    if metadata.images:
        extension = _extension(path)
        meta_extension = f"{extension}.meta" if extension in ("md", "txt") else "txt.meta"
        sidecar = _with_extension(path, meta_extension)
        sidecar.write_bytes(json.dumps(metadata.to_dict(), indent=2).encode("utf-8"))


def load_from_path(
    path: str | Path,
) -> tuple[list[DocumentLine], DocumentMetadata, dict[str, bytes]]:
    """Read a document and its sidecar; returns lines, metadata and decoded images.

    Raises OSError when the file cannot be read and ValueError when its text or
    sidecar is malformed.
    """
    path = Path(path)
    text = path.read_bytes().decode("utf-8")
    sidecar = _with_extension(path, f"{_extension(path)}.meta")
    if sidecar.exists():
        metadata = DocumentMetadata.from_dict(json.loads(sidecar.read_bytes().decode("utf-8")))
    else:
        metadata = DocumentMetadata()
    image_data: dict[str, bytes] = {}
    lines = text_to_content(text, metadata, image_data)
    return lines, metadata, image_data