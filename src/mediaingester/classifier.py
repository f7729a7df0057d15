"""Maps an object key's file extension to the kind of media it holds."""

from __future__ import annotations

import posixpath
from typing import Optional

from mediaingester.models.state import ContentType

EXTENSION_CONTENT_TYPES: dict[str, ContentType] = {
    "jpg": ContentType.IMAGE,
    "jpeg": ContentType.IMAGE,
    "png": ContentType.IMAGE,
    "gif": ContentType.IMAGE,

    "mp3": ContentType.AUDIO,
    "wav": ContentType.AUDIO,

    "mp4": ContentType.VIDEO,

    "txt": ContentType.TEXT,
}

# Rekognition image moderation supports jpeg and png only
MODERATABLE_IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png"})


def extension_of(object_key: str) -> Optional[str]:
    """Return the trimmed, lower-cased extension of the key's file name, if any."""
    _, ext = posixpath.splitext(posixpath.basename(object_key.strip()))
    ext = ext.strip().lstrip(".").lower()
    return ext or None


def classify(object_key: str) -> tuple[ContentType, Optional[str]]:
    """Classify an object key; unrecognised extensions map to Unknown."""
    ext = extension_of(object_key)
    if ext is None:
        return ContentType.UNKNOWN, None
    return EXTENSION_CONTENT_TYPES.get(ext, ContentType.UNKNOWN), ext
