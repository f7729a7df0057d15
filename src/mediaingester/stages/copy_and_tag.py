"""CopyAndTag stage: file images and videos under their output folder with tags."""

from __future__ import annotations

import logging
import posixpath

from mediaingester.core.constants import (
    CELEBRITIES_TAG_KEY,
    IMAGES_OUTPUT_SUBPATH,
    KEYWORDS_TAG_KEY,
    TAG_VALUE_SEPARATOR,
    VIDEOS_OUTPUT_SUBPATH,
)
from mediaingester.core.types import TagSet
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState
from mediaingester.stages.base import StageServices, output_key
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)

OUTPUT_SUBPATHS = {
    ContentType.IMAGE: IMAGES_OUTPUT_SUBPATH,
    ContentType.VIDEO: VIDEOS_OUTPUT_SUBPATH,
}


def build_tags(state: MediaState) -> TagSet:
    """Two tags only; object stores cap the number of tags per object."""
    return {
        KEYWORDS_TAG_KEY: TAG_VALUE_SEPARATOR.join(state.keywords),
        CELEBRITIES_TAG_KEY: TAG_VALUE_SEPARATOR.join(state.celebrities),
    }


@stage(Stage.COPY_AND_TAG)
def copy_and_tag(state: MediaState, services: StageServices) -> MediaState:
    subpath = OUTPUT_SUBPATHS.get(state.content_type)
    if subpath is None:
        logger.info("%s is not image or video media, skipping source copy", state.location)
        return state

    outputs_root = services.config.outputs_root_path()
    target_key = output_key(outputs_root, subpath, posixpath.basename(state.input_object_key))
    logger.info("Copying %s to %s with %d keyword and %d celebrity tags", state.location, target_key,
                len(state.keywords), len(state.celebrities))
    services.object_store.copy(state.bucket, state.input_object_key, state.bucket, target_key,
                               tags=build_tags(state))
    return state
