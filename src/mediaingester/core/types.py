"""Type aliases used across the media ingester."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]

# Object tags, key -> value; applied to an object as a whole set
TagSet = dict[str, str]
