"""Uploaded media descriptor."""

from typing import Optional

from loop.domain.model.common import DomainModel
from loop.domain.value import MediaKind


class MediaUpload(DomainModel):
    """Where an uploaded file lives and what the store learned about it."""

    url: str
    kind: MediaKind
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[float] = None
    bytes: Optional[int] = None
