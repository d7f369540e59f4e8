"""Document model: lines of text and image elements, plus saved metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union


@dataclass
class TextElement:
    """A run of editable text within a line."""

    text: str = ""


@dataclass
class ImageElement:
    """A reference to an embedded image with its pixel dimensions."""

    id: str
    width: int
    height: int


LineElement = Union[TextElement, ImageElement]


def _default_elements() -> list[LineElement]:
    return [TextElement()]


@dataclass
class DocumentLine:
    """One line of the document, made of text and image elements."""

    elements: list[LineElement] = field(default_factory=_default_elements)

    def text_content(self) -> str:
        """Concatenate the text of every text element on the line."""
        return "".join(
            element.text for element in self.elements if isinstance(element, TextElement)
        )

    def is_empty(self) -> bool:
        """True when the line holds only empty text elements."""
        return all(
            isinstance(element, TextElement) and not element.text
            for element in self.elements
        )


def _require(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"field {key!r} must be a non-negative integer")
    elif not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


@dataclass
class ImageMetadata:
    """Stored form of an image: base64 data and dimensions."""

    id: str
    data: str
    width: int
    height: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "data": self.data,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ImageMetadata":
        return cls(
            id=_require(data, "id", str),
            data=_require(data, "data", str),
            width=_require(data, "width", int),
            height=_require(data, "height", int),
        )


@dataclass
class DocumentMetadata:
    """All images belonging to a document, keyed by image id."""

    images: dict[str, ImageMetadata] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"images": {key: image.to_dict() for key, image in self.images.items()}}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentMetadata":
        images = _require(data, "images", Mapping)
        return cls(
            images={
                str(key): ImageMetadata.from_dict(value) for key, value in images.items()
            }
        )