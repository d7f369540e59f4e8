"""Creating, reading and inserting images into a document."""

from __future__ import annotations

import base64
import io
import logging
import uuid
from dataclasses import dataclass
from typing import MutableMapping

from PIL import Image, ImageGrab, UnidentifiedImageError

from .models import DocumentLine, ImageElement, ImageMetadata

logger = logging.getLogger(__name__)

SAMPLE_WIDTH = 200
SAMPLE_HEIGHT = 100


class ClipboardImageError(RuntimeError):
    """The clipboard holds no usable image."""


@dataclass(frozen=True)
class InsertedImage:
    """Where an image went; the cursor column is always 0 afterwards."""

    id: str
    width: int
    height: int
    cursor_line: int


def _to_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def create_sample_image() -> bytes:
    """A 200x100 PNG with a red-green gradient over a fixed blue channel."""
    image = Image.new("RGBA", (SAMPLE_WIDTH, SAMPLE_HEIGHT))
    image.putdata(
        [
            (int(x / SAMPLE_WIDTH * 255.0), int(y / SAMPLE_HEIGHT * 255.0), 128, 255)
            for y in range(SAMPLE_HEIGHT)
            for x in range(SAMPLE_WIDTH)
        ]
    )
    return _to_png(image)


def get_image_from_clipboard() -> bytes:
    """Read an image from the system clipboard and encode it as PNG."""
    logger.debug("Attempting to paste image from clipboard")
    try:
        content = ImageGrab.grabclipboard()
    except (OSError, NotImplementedError) as exc:
        raise ClipboardImageError(f"clipboard unavailable: {exc}") from exc
    if not isinstance(content, Image.Image):
        raise ClipboardImageError("clipboard does not contain an image")
    logger.debug("Got image data: %dx%d", content.width, content.height)
    png = _to_png(content.convert("RGBA"))
    logger.debug("Created PNG buffer of %d bytes", len(png))
    return png


def process_image_bytes(
    image_bytes: bytes,
    lines: list[DocumentLine],
    cursor_line: int,
    image_data: MutableMapping[str, bytes],
    metadata_images: MutableMapping[str, ImageMetadata],
) -> InsertedImage:
    """Register an image and insert it on a new line after ``cursor_line``.

    An empty line follows the image and the cursor moves onto it. Raises
    ValueError when the bytes are not a decodable image and IndexError when
    ``cursor_line`` is outside the document.
    """
    logger.debug("Processing image from %d bytes", len(image_bytes))
    try:
        with Image.open(io.BytesIO(image_bytes)) as image:
            image.load()
            width, height = image.size
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"not a decodable image: {exc}") from exc
    if not 0 <= cursor_line < len(lines):
        raise IndexError(f"cursor line {cursor_line} outside document of {len(lines)} lines")

    image_id = str(uuid.uuid4())
    image_bytes = bytes(image_bytes)
    image_data[image_id] = image_bytes
    metadata_images[image_id] = ImageMetadata(
        id=image_id,
        data=base64.b64encode(image_bytes).decode("ascii"),
        width=width,
        height=height,
    )

    image_line = cursor_line + 1
    lines.insert(image_line, DocumentLine([ImageElement(image_id, width, height)]))
    lines.insert(image_line + 1, DocumentLine())
    logger.debug("Inserted image on line %d. Total lines: %d", image_line, len(lines))
    return InsertedImage(image_id, width, height, image_line + 1)