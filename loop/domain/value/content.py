"""Loop content.

Content is a tagged union keyed on `type`. Each variant carries either text
or a media URL plus optional metadata.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from loop.domain.value.common import ValueObject


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class TextContent(ValueObject):
    """Plain text loop."""

    type: Literal["text"] = "text"
    text: str = Field(default="", max_length=5000)
    title: Optional[str] = Field(default=None, max_length=200)

    def is_empty(self) -> bool:
        return _blank(self.text)


class ImageContent(ValueObject):
    """Image loop."""

    type: Literal["image"] = "image"
    image_url: str = ""
    caption: Optional[str] = Field(default=None, max_length=2000)
    width: Optional[int] = None
    height: Optional[int] = None

    def is_empty(self) -> bool:
        return _blank(self.image_url) and _blank(self.caption)


class VideoContent(ValueObject):
    """Video loop."""

    type: Literal["video"] = "video"
    video_url: str = ""
    description: Optional[str] = Field(default=None, max_length=2000)
    duration: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def is_empty(self) -> bool:
        return _blank(self.video_url) and _blank(self.description)


class AudioContent(ValueObject):
    """Audio loop."""

    type: Literal["audio"] = "audio"
    audio_url: str = ""
    description: Optional[str] = Field(default=None, max_length=2000)
    duration: Optional[float] = None

    def is_empty(self) -> bool:
        return _blank(self.audio_url) and _blank(self.description)


class FileContent(ValueObject):
    """Arbitrary file attachment."""

    type: Literal["file"] = "file"
    file_url: str = ""
    file_name: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=2000)

    def is_empty(self) -> bool:
        return _blank(self.file_url) and _blank(self.description)


LoopContent = Annotated[
    Union[TextContent, ImageContent, VideoContent, AudioContent, FileContent],
    Field(discriminator="type"),
]

loop_content_adapter: TypeAdapter[LoopContent] = TypeAdapter(LoopContent)


def parse_content(data: dict) -> LoopContent:
    """Parse stored or submitted content into its variant."""
    return loop_content_adapter.validate_python(data)


# Free-text fields across all variants, matched by search
SEARCHABLE_FIELDS = ("text", "title", "caption", "description", "file_name")


def searchable_text(content: LoopContent) -> str:
    """Free text of a content variant, joined for substring matching."""
    parts = [getattr(content, name, None) for name in SEARCHABLE_FIELDS]
    return " ".join(part for part in parts if part)
