"""Thumbnail stage: fit images inside a square of the configured size."""

from __future__ import annotations

import io
import logging
import posixpath

from PIL import Image, UnidentifiedImageError

from mediaingester.core.constants import IMAGE_THUMBNAILS_OUTPUT_SUBPATH
from mediaingester.core.exceptions import StageFailedError
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState
from mediaingester.stages.base import StageServices, output_key
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)


def fit_size(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    """Scale (width, height) so the larger side equals max_dimension, keeping aspect ratio."""
    scale = max_dimension / max(width, height)
    return max(1, round(width * scale)), max(1, round(height * scale))


def render_thumbnail(image: Image.Image, max_dimension: int) -> bytes:
    """Resize and re-encode an image as JPEG."""
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    resized = image.resize(fit_size(image.width, image.height, max_dimension),
                           Image.Resampling.LANCZOS)
    buffer = io.BytesIO()
    resized.save(buffer, format="JPEG")
    return buffer.getvalue()


@stage(Stage.THUMBNAIL)
def create_thumbnail(state: MediaState, services: StageServices) -> MediaState:
    if state.content_type is not ContentType.IMAGE:
        logger.info("Thumbnails only apply to images, skipping %s", state.location)
        return state

    outputs_root = services.config.outputs_root_path()
    max_dimension = services.config.thumbnail_max_dimension()
    filename = posixpath.basename(state.input_object_key)
    thumbnail_key = output_key(outputs_root, IMAGE_THUMBNAILS_OUTPUT_SUBPATH, filename)

    logger.info("Creating thumbnail for image %s", state.location)
    data = services.object_store.get(state.bucket, state.input_object_key)
    try:
        with Image.open(io.BytesIO(data)) as image:
            if image.width <= max_dimension and image.height <= max_dimension:
                logger.info("Image is within %d pixels, copying original to %s",
                            max_dimension, thumbnail_key)
                services.object_store.copy(state.bucket, state.input_object_key,
                                           state.bucket, thumbnail_key)
            else:
                logger.info("Resizing image to max dimension %d, writing %s",
                            max_dimension, thumbnail_key)
                services.object_store.put(state.bucket, thumbnail_key,
                                          render_thumbnail(image, max_dimension))
    except (UnidentifiedImageError, OSError) as exc:
        raise StageFailedError(Stage.THUMBNAIL, f"cannot decode {state.location}: {exc}") from exc

    state.output_object_key = thumbnail_key
    return state
