"""Classify stage: work out what kind of media the new object holds."""

from __future__ import annotations

import logging

from mediaingester.classifier import classify
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState
from mediaingester.stages.base import StageServices
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)


@stage(Stage.CLASSIFY)
def classify_content(state: MediaState, services: StageServices) -> MediaState:
    logger.info("Media ingester workflow started to process %s", state.location)

    if state.content_type is not ContentType.UNKNOWN:
        logger.info("%s already classified as %s, keeping it", state.location, state.content_type)
        return state

    content_type, extension = classify(state.input_object_key)
    state.content_type = content_type
    state.extension = extension
    if content_type is ContentType.UNKNOWN:
        logger.warning("Extension %r of %s is not a supported media type", extension, state.location)
    else:
        logger.info("Classified %s as %s", state.location, content_type)
    return state
